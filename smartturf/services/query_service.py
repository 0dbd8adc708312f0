"""Read-only projections over turfs, kits, bookings and matches."""

from typing import List

from sqlalchemy.orm import Session

from smartturf.models.kit import Kit
from smartturf.models.turf import Turf
from smartturf.repository import booking_repository, kit_repository, match_repository, turf_repository


class QueryService:
    def __init__(self, db: Session):
        self.db = db

    def list_turfs(self) -> List[Turf]:
        return turf_repository.list_turfs(self.db)

    def list_available_kits(self) -> List[Kit]:
        return kit_repository.list_available_kits(self.db)

    def list_user_bookings(self, user_id: int) -> List[dict]:
        """Return the user's bookings, newest first, with turf and kit display fields."""

        bookings = booking_repository.list_user_bookings(self.db, user_id)
        return [
            {
                "id": booking.id,
                "start_time": booking.start_time,
                "end_time": booking.end_time,
                "total_price": booking.total_price,
                "status": booking.status,
                "turf_id": booking.turf_id,
                "turf_name": booking.turf.name,
                "turf_location": booking.turf.location,
                "kit_id": booking.kit_id,
                "kit_name": booking.kit.name if booking.kit is not None else None,
            }
            for booking in bookings
        ]

    def list_open_matches(self) -> List[dict]:
        return [
            {
                "id": match.id,
                "sport": match.sport,
                "players_needed": match.players_needed,
                "contribution_per_person": match.contribution_per_person,
                "match_time": match.match_time,
                "status": match.status,
                "organizer_id": match.organizer_id,
                "turf_id": match.turf_id,
                "turf_name": turf_name,
                "current_players": current_players,
            }
            for match, turf_name, current_players in match_repository.list_open_matches(self.db)
        ]
