"""Domain services for the booking service."""

from smartturf.services.booking_service import BookingService
from smartturf.services.catalog_service import CatalogService
from smartturf.services.match_service import MatchService
from smartturf.services.query_service import QueryService
from smartturf.services.slot_service import SlotService

__all__ = [
    "BookingService",
    "CatalogService",
    "MatchService",
    "QueryService",
    "SlotService",
]
