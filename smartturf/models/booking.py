"""ORM model for turf bookings."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Numeric,
    String,
    func,
    text,
)
from sqlalchemy.orm import relationship

from smartturf.core.database import Base
from smartturf.models.types import Identifier

BOOKING_STATUS_CONFIRMED = "confirmed"
BOOKING_STATUS_CANCELLED = "cancelled"


class Booking(Base):
    """A one-hour reservation of a turf, optionally with a kit."""

    __tablename__ = "bookings"
    __table_args__ = (
        # At most one confirmed booking per turf and start time.
        Index(
            "ux_bookings_turf_start_confirmed",
            "turf_id",
            "start_time",
            unique=True,
            postgresql_where=text("status = 'confirmed'"),
            sqlite_where=text("status = 'confirmed'"),
        ),
        Index("ix_bookings_user_start", "user_id", "start_time"),
        CheckConstraint(
            "status IN ('confirmed', 'cancelled')", name="ck_bookings_status"
        ),
        CheckConstraint("end_time > start_time", name="ck_bookings_time_range"),
    )

    id = Column(Identifier, primary_key=True, index=True)
    user_id = Column(Identifier, nullable=False)
    turf_id = Column(Identifier, ForeignKey("turfs.id"), nullable=False)
    kit_id = Column(Identifier, ForeignKey("kits.id"), nullable=True)
    start_time = Column(DateTime(timezone=True), nullable=False)
    end_time = Column(DateTime(timezone=True), nullable=False)
    total_price = Column(Numeric(10, 2), nullable=False)
    status = Column(String(30), nullable=False, default=BOOKING_STATUS_CONFIRMED)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    turf = relationship("Turf", back_populates="bookings")
    kit = relationship("Kit")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return (
            f"<Booking(id={self.id}, turf_id={self.turf_id}, "
            f"start_time={self.start_time}, status={self.status})>"
        )


__all__ = ["Booking", "BOOKING_STATUS_CONFIRMED", "BOOKING_STATUS_CANCELLED"]
