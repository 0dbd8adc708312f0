"""Pydantic schemas for bookings and slot availability."""

from __future__ import annotations

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from smartturf.schemas.common import MAX_IDENTIFIER, UtcDatetime


class BookingCreate(BaseModel):
    """Request body for reserving a slot. The price is always computed server-side."""

    turf_id: int = Field(..., gt=0, le=MAX_IDENTIFIER)
    start_time: UtcDatetime
    kit_id: Optional[int] = Field(None, gt=0, le=MAX_IDENTIFIER)


class BookingResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    turf_id: int
    kit_id: Optional[int] = None
    start_time: UtcDatetime
    end_time: UtcDatetime
    total_price: Decimal
    status: str
    created_at: Optional[UtcDatetime] = None


class UserBookingResponse(BaseModel):
    """A booking in the caller's history, with turf and kit display fields."""

    id: int
    start_time: UtcDatetime
    end_time: UtcDatetime
    total_price: Decimal
    status: str
    turf_id: int
    turf_name: str
    turf_location: str
    kit_id: Optional[int] = None
    kit_name: Optional[str] = None


class SlotResponse(BaseModel):
    time: str = Field(..., description="Display label, e.g. '6:00 PM'")
    full_time: str = Field(..., description="Canonical slot key in HH:00 format")
    start_time: UtcDatetime
    available: bool


class SlotListResponse(BaseModel):
    slots: list[SlotResponse]
