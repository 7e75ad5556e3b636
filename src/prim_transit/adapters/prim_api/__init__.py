"""PRIM (Île-de-France Mobilités) API adapter."""

from prim_transit.adapters.prim_api.aiohttp_transport import AiohttpTransport
from prim_transit.adapters.prim_api.prim_client import PrimClient
from prim_transit.adapters.prim_api.validation import ValidationResult, validate_payload

__all__ = [
    "AiohttpTransport",
    "PrimClient",
    "ValidationResult",
    "validate_payload",
]
