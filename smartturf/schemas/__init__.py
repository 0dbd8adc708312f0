"""Pydantic schemas for the booking service."""

from smartturf.schemas.booking import (
    BookingCreate,
    BookingResponse,
    SlotListResponse,
    SlotResponse,
    UserBookingResponse,
)
from smartturf.schemas.kit import KitCreate, KitResponse
from smartturf.schemas.match import (
    JoinMatchResponse,
    MatchCreate,
    MatchResponse,
    OpenMatchResponse,
    ParticipantResponse,
)
from smartturf.schemas.turf import TurfCreate, TurfResponse

__all__ = [
    "BookingCreate",
    "BookingResponse",
    "SlotListResponse",
    "SlotResponse",
    "UserBookingResponse",
    "KitCreate",
    "KitResponse",
    "JoinMatchResponse",
    "MatchCreate",
    "MatchResponse",
    "OpenMatchResponse",
    "ParticipantResponse",
    "TurfCreate",
    "TurfResponse",
]
