"""ORM model for bookable turfs."""

from sqlalchemy import Column, DateTime, Numeric, String, Text, func
from sqlalchemy.orm import relationship

from smartturf.core.database import Base
from smartturf.models.types import Identifier


class Turf(Base):
    __tablename__ = "turfs"

    id = Column(Identifier, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    location = Column(Text, nullable=False)
    price_per_hour = Column(Numeric(10, 2), nullable=False)
    latitude = Column(Numeric(9, 6), nullable=True)
    longitude = Column(Numeric(9, 6), nullable=True)
    rating = Column(Numeric(3, 2), nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    bookings = relationship("Booking", back_populates="turf")
    matches = relationship("Match", back_populates="turf")

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Turf(id={self.id}, name={self.name})>"


__all__ = ["Turf"]
