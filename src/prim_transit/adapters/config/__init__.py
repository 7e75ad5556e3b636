"""Configuration adapters."""

from prim_transit.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
