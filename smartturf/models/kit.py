"""ORM model for rentable equipment kits."""

from sqlalchemy import Boolean, Column, DateTime, Numeric, String, Text, func, true

from smartturf.core.database import Base
from smartturf.models.types import Identifier


class Kit(Base):
    __tablename__ = "kits"

    id = Column(Identifier, primary_key=True, index=True)
    name = Column(String(200), nullable=False)
    description = Column(Text, nullable=True)
    price_per_hour = Column(Numeric(10, 2), nullable=False)
    available = Column(Boolean, nullable=False, default=True, server_default=true())
    owner_id = Column(Identifier, nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self) -> str:  # pragma: no cover - debugging helper
        return f"<Kit(id={self.id}, name={self.name}, available={self.available})>"


__all__ = ["Kit"]
