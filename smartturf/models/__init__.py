"""SQLAlchemy models for the booking service."""
from smartturf.models.turf import Turf
from smartturf.models.kit import Kit
from smartturf.models.booking import Booking
from smartturf.models.match import Match, MatchParticipant

__all__ = ["Turf", "Kit", "Booking", "Match", "MatchParticipant"]
