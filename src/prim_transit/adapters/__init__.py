"""Adapters for external systems."""

from prim_transit.adapters.config import AppConfig
from prim_transit.adapters.prim_api import AiohttpTransport, PrimClient

__all__ = ["AiohttpTransport", "AppConfig", "PrimClient"]
