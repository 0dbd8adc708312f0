"""API routes for pickup matches."""

from typing import List

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from smartturf.core.security import get_current_user_id
from smartturf.dependencies import get_db
from smartturf.schemas import (
    JoinMatchResponse,
    MatchCreate,
    MatchResponse,
    OpenMatchResponse,
)
from smartturf.schemas.common import MAX_IDENTIFIER
from smartturf.services import MatchService, QueryService

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get("", response_model=List[OpenMatchResponse])
def list_open_matches(db: Session = Depends(get_db)) -> List[OpenMatchResponse]:
    """Retrieve open matches with their live participant counts."""

    return QueryService(db).list_open_matches()


@router.post("", response_model=MatchResponse, status_code=status.HTTP_201_CREATED)
def create_match(
    payload: MatchCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> MatchResponse:
    """Create a match; the caller is enrolled as its first player."""

    return MatchService(db).create_match(
        organizer_id=user_id,
        turf_id=payload.turf_id,
        sport=payload.sport,
        match_time=payload.match_time,
        players_needed=payload.players_needed,
        contribution_per_person=payload.contribution_per_person,
    )


@router.post("/{match_id}/join", response_model=JoinMatchResponse)
def join_match(
    match_id: int = Path(..., gt=0, le=MAX_IDENTIFIER),
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> JoinMatchResponse:
    service = MatchService(db)
    participant = service.join_match(match_id=match_id, user_id=user_id)
    return {
        "message": "Successfully joined match",
        "data": participant,
        "match": service.get_match(match_id),
    }
