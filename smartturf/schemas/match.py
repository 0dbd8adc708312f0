"""Pydantic schemas for matches and roster changes."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from smartturf.schemas.common import MAX_IDENTIFIER, UtcDatetime


class MatchCreate(BaseModel):
    turf_id: int = Field(..., gt=0, le=MAX_IDENTIFIER)
    sport: str = Field(..., min_length=1, max_length=100)
    match_time: UtcDatetime
    players_needed: int = Field(..., ge=1)
    contribution_per_person: Decimal = Field(
        Decimal("0"), ge=0, max_digits=10, decimal_places=2
    )

    @field_validator("sport")
    @classmethod
    def _strip_sport(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("sport must not be blank")
        return value


class MatchResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    organizer_id: int
    turf_id: int
    sport: str
    match_time: UtcDatetime
    players_needed: int
    contribution_per_person: Decimal
    status: str
    current_players: int
    created_at: Optional[UtcDatetime] = None


class OpenMatchResponse(BaseModel):
    """An open match as listed for players looking for a game."""

    id: int
    sport: str
    players_needed: int
    contribution_per_person: Decimal
    match_time: UtcDatetime
    status: str
    organizer_id: int
    turf_id: int
    turf_name: str
    current_players: int


class ParticipantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    match_id: int
    user_id: int
    joined_at: Optional[UtcDatetime] = None


class JoinMatchResponse(BaseModel):
    message: str
    data: ParticipantResponse
    match: MatchResponse
