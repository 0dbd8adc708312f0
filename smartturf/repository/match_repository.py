from __future__ import annotations

from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload, selectinload

from smartturf.models.match import MATCH_STATUS_OPEN, Match, MatchParticipant
from smartturf.models.turf import Turf


def create_match(db: Session, match_data: dict) -> Match:
    match = Match(**match_data)
    db.add(match)
    db.flush([match])
    return match


def get_match(db: Session, match_id: int) -> Optional[Match]:
    return (
        db.query(Match)
        .options(joinedload(Match.turf), selectinload(Match.participants))
        .filter(Match.id == match_id)
        .populate_existing()
        .first()
    )


def lock_match(db: Session, match_id: int) -> Optional[Match]:
    """Fetch a match holding a row lock until the surrounding transaction ends."""

    return (
        db.query(Match)
        .filter(Match.id == match_id)
        .with_for_update()
        .populate_existing()
        .first()
    )


def add_participant(db: Session, *, match_id: int, user_id: int) -> MatchParticipant:
    participant = MatchParticipant(match_id=match_id, user_id=user_id)
    db.add(participant)
    db.flush([participant])
    return participant


def get_participant(db: Session, *, match_id: int, user_id: int) -> Optional[MatchParticipant]:
    return (
        db.query(MatchParticipant)
        .filter(MatchParticipant.match_id == match_id)
        .filter(MatchParticipant.user_id == user_id)
        .first()
    )


def count_participants(db: Session, match_id: int) -> int:
    return (
        db.query(func.count(MatchParticipant.id))
        .filter(MatchParticipant.match_id == match_id)
        .scalar()
        or 0
    )


def list_open_matches(db: Session) -> list[tuple[Match, str, int]]:
    """Return open matches with their turf name and live participant count."""

    participant_counts = (
        db.query(
            MatchParticipant.match_id.label("match_id"),
            func.count(MatchParticipant.id).label("current_players"),
        )
        .group_by(MatchParticipant.match_id)
        .subquery()
    )

    rows = (
        db.query(
            Match,
            Turf.name,
            func.coalesce(participant_counts.c.current_players, 0),
        )
        .join(Turf, Match.turf_id == Turf.id)
        .outerjoin(participant_counts, participant_counts.c.match_id == Match.id)
        .filter(Match.status == MATCH_STATUS_OPEN)
        .filter(
            func.coalesce(participant_counts.c.current_players, 0) < Match.players_needed
        )
        .order_by(Match.match_time.asc(), Match.id.asc())
        .all()
    )
    return [(match, turf_name, int(current_players)) for match, turf_name, current_players in rows]
