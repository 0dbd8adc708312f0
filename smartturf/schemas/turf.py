from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from smartturf.schemas.common import UtcDatetime


class TurfCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    location: str = Field(..., min_length=1)
    price_per_hour: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)
    latitude: Optional[Decimal] = Field(None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(None, ge=-180, le=180)


class TurfResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
    price_per_hour: Decimal
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    rating: Decimal
    created_at: Optional[UtcDatetime] = None
