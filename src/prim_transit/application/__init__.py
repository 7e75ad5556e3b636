"""Application layer - use cases built on the transit client port."""

from prim_transit.application.services import BulkPassagesService, LateChanceService

__all__ = ["BulkPassagesService", "LateChanceService"]
