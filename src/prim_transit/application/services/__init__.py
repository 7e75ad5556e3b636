"""Application services."""

from prim_transit.application.services.bulk_passages_service import BulkPassagesService
from prim_transit.application.services.late_chance_service import LateChanceService

__all__ = ["BulkPassagesService", "LateChanceService"]
