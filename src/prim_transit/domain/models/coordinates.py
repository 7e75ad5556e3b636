"""Coordinates domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """WGS84 position."""

    lat: float
    lon: float
