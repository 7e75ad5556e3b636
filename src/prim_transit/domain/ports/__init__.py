"""Ports (interfaces) for the ports-and-adapters architecture."""

from prim_transit.domain.ports.http_transport import HttpTransport
from prim_transit.domain.ports.transit_client import TransitClient

__all__ = [
    "HttpTransport",
    "TransitClient",
]
