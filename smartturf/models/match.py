"""ORM models for pickup matches and their rosters."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import relationship

from smartturf.core.database import Base
from smartturf.models.types import Identifier

MATCH_STATUS_OPEN = "open"
MATCH_STATUS_FULL = "full"
MATCH_STATUS_CANCELLED = "cancelled"


class Match(Base):
    """An organizer-created game with a fixed number of player spots."""

    __tablename__ = "matches"
    __table_args__ = (
        CheckConstraint("players_needed >= 1", name="ck_matches_players_needed"),
        CheckConstraint(
            "contribution_per_person >= 0", name="ck_matches_contribution"
        ),
        CheckConstraint(
            "status IN ('open', 'full', 'cancelled')", name="ck_matches_status"
        ),
    )

    id = Column(Identifier, primary_key=True, index=True)
    organizer_id = Column(Identifier, nullable=False, index=True)
    turf_id = Column(Identifier, ForeignKey("turfs.id"), nullable=False)
    sport = Column(String(100), nullable=False)
    match_time = Column(DateTime(timezone=True), nullable=False)
    players_needed = Column(Integer, nullable=False)
    contribution_per_person = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(String(30), nullable=False, default=MATCH_STATUS_OPEN)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    turf = relationship("Turf", back_populates="matches")
    participants = relationship(
        "MatchParticipant",
        back_populates="match",
        cascade="all, delete-orphan",
        order_by="MatchParticipant.id",
    )

    @property
    def current_players(self) -> int:
        return len(self.participants)

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            f"<Match(id={self.id}, sport={self.sport}, status={self.status}, "
            f"players_needed={self.players_needed})>"
        )


class MatchParticipant(Base):
    __tablename__ = "match_participants"
    __table_args__ = (
        UniqueConstraint("match_id", "user_id", name="uq_match_participants_match_user"),
    )

    id = Column(Identifier, primary_key=True, index=True)
    match_id = Column(
        Identifier,
        ForeignKey("matches.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(Identifier, nullable=False)
    joined_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    match = relationship("Match", back_populates="participants")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<MatchParticipant(match_id={self.match_id}, user_id={self.user_id})>"


__all__ = [
    "Match",
    "MatchParticipant",
    "MATCH_STATUS_OPEN",
    "MATCH_STATUS_FULL",
    "MATCH_STATUS_CANCELLED",
]
