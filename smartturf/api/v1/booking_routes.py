"""API routes for slot availability and bookings."""

from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Path, Query, status
from sqlalchemy.orm import Session

from smartturf.core.config import Settings
from smartturf.core.security import get_current_user_id
from smartturf.dependencies import get_config, get_db
from smartturf.schemas import (
    BookingCreate,
    BookingResponse,
    SlotListResponse,
    UserBookingResponse,
)
from smartturf.schemas.common import MAX_IDENTIFIER
from smartturf.services import BookingService, QueryService, SlotService

router = APIRouter(tags=["bookings"])


@router.get("/bookings/slots/{turf_id}", response_model=SlotListResponse)
def list_slots(
    turf_id: int = Path(..., gt=0, le=MAX_IDENTIFIER),
    *,
    db: Session = Depends(get_db),
    config: Settings = Depends(get_config),
    date_value: date = Query(
        ...,
        alias="date",
        description="UTC calendar day in ISO format (YYYY-MM-DD)",
        examples=["2024-05-15"],
    ),
) -> SlotListResponse:
    """Retrieve the one-hour slots of a turf for the selected day."""

    slots = SlotService(db, config).compute_slots(turf_id, date_value)
    return {"slots": slots}


@router.post("/bookings", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    db: Session = Depends(get_db),
    config: Settings = Depends(get_config),
    user_id: int = Depends(get_current_user_id),
) -> BookingResponse:
    """Reserve a one-hour slot, optionally renting a kit with it."""

    return BookingService(db, config).reserve(
        user_id=user_id,
        turf_id=payload.turf_id,
        start_time=payload.start_time,
        kit_id=payload.kit_id,
    )


@router.get("/my-bookings", response_model=List[UserBookingResponse])
def list_my_bookings(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> List[UserBookingResponse]:
    """Retrieve the caller's bookings ordered from newest to oldest."""

    return QueryService(db).list_user_bookings(user_id)
