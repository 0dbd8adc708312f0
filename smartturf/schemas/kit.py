from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from smartturf.schemas.common import UtcDatetime


class KitCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    price_per_hour: Decimal = Field(..., gt=0, max_digits=10, decimal_places=2)


class KitResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    price_per_hour: Decimal
    available: bool
    owner_id: Optional[int] = None
    created_at: Optional[UtcDatetime] = None
