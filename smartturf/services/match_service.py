import logging
from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from smartturf.core.database import begin_write
from smartturf.core.exceptions import (
    AlreadyJoinedError,
    InternalError,
    InvalidInputError,
    MatchFullError,
    NotFoundError,
    SmartTurfError,
)
from smartturf.core.time_utils import as_utc, utc_now
from smartturf.models.match import (
    MATCH_STATUS_FULL,
    MATCH_STATUS_OPEN,
    Match,
    MatchParticipant,
)
from smartturf.repository import match_repository, turf_repository

logger = logging.getLogger(__name__)


def status_for_roster(current_players: int, players_needed: int) -> str:
    return MATCH_STATUS_FULL if current_players >= players_needed else MATCH_STATUS_OPEN


class MatchService:
    """Match roster manager.

    Creating a match enrolls the organizer in the same transaction. Joins lock
    the match row for the capacity check and insert, so concurrent joins cannot
    overfill a roster; the match flips to ``full`` when the last spot is taken.
    """

    def __init__(self, db: Session, clock: Callable[[], datetime] = utc_now):
        self.db = db
        self._clock = clock

    def get_match(self, match_id: int) -> Match:
        match = match_repository.get_match(self.db, match_id)
        if match is None:
            raise NotFoundError(f"Match {match_id} not found")
        return match

    def create_match(
        self,
        *,
        organizer_id: int,
        turf_id: int,
        sport: str,
        match_time: datetime,
        players_needed: int,
        contribution_per_person: Decimal = Decimal("0"),
    ) -> Match:
        if players_needed < 1:
            raise InvalidInputError("players_needed must be at least 1")
        if contribution_per_person < 0:
            raise InvalidInputError("contribution_per_person must not be negative")
        sport = (sport or "").strip()
        if not sport:
            raise InvalidInputError("sport is required")

        match_time = as_utc(match_time)
        if match_time < self._clock():
            raise InvalidInputError("match_time must not be in the past")

        try:
            begin_write(self.db)
            if turf_repository.get_turf(self.db, turf_id) is None:
                raise NotFoundError(f"Turf {turf_id} not found")

            match = match_repository.create_match(
                self.db,
                {
                    "organizer_id": organizer_id,
                    "turf_id": turf_id,
                    "sport": sport,
                    "match_time": match_time,
                    "players_needed": players_needed,
                    "contribution_per_person": contribution_per_person,
                    # The organizer takes the first spot.
                    "status": status_for_roster(1, players_needed),
                },
            )
            match_repository.add_participant(
                self.db, match_id=match.id, user_id=organizer_id
            )
            self.db.commit()
        except SmartTurfError:
            self.db.rollback()
            raise
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception(
                "Failed to create match for organizer %s on turf %s", organizer_id, turf_id
            )
            raise InternalError("Failed to create match.") from exc

        logger.info(
            "Match %s created by user %s on turf %s (%s players)",
            match.id,
            organizer_id,
            turf_id,
            players_needed,
        )
        return self.get_match(match.id)

    def join_match(self, *, match_id: int, user_id: int) -> MatchParticipant:
        try:
            begin_write(self.db)
            match = match_repository.lock_match(self.db, match_id)
            if match is None:
                raise NotFoundError(f"Match {match_id} not found")

            if match_repository.get_participant(self.db, match_id=match_id, user_id=user_id):
                raise AlreadyJoinedError()

            current_players = match_repository.count_participants(self.db, match_id)
            if match.status != MATCH_STATUS_OPEN or current_players >= match.players_needed:
                raise MatchFullError()

            participant = match_repository.add_participant(
                self.db, match_id=match_id, user_id=user_id
            )
            match.status = status_for_roster(current_players + 1, match.players_needed)
            self.db.commit()
        except SmartTurfError as exc:
            self.db.rollback()
            logger.info("Join rejected for user %s on match %s: %s", user_id, match_id, exc)
            raise
        except IntegrityError as exc:
            self.db.rollback()
            raise AlreadyJoinedError() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to add user %s to match %s", user_id, match_id)
            raise InternalError("Failed to join match.") from exc

        self.db.refresh(participant)
        logger.info(
            "User %s joined match %s (%s/%s, %s)",
            user_id,
            match_id,
            current_players + 1,
            match.players_needed,
            match.status,
        )
        return participant
