from __future__ import annotations

from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from smartturf.models.booking import BOOKING_STATUS_CONFIRMED, Booking


def create_booking(db: Session, booking_data: dict) -> Booking:
    """Stage a booking and flush it so constraint violations surface immediately."""

    booking = Booking(**booking_data)
    db.add(booking)
    db.flush([booking])
    return booking


def list_confirmed_start_times(
    db: Session,
    *,
    turf_id: int,
    range_start: datetime,
    range_end: datetime,
) -> list[datetime]:
    rows = (
        db.query(Booking.start_time)
        .filter(Booking.turf_id == turf_id)
        .filter(Booking.status == BOOKING_STATUS_CONFIRMED)
        .filter(Booking.start_time >= range_start)
        .filter(Booking.start_time < range_end)
        .order_by(Booking.start_time)
        .all()
    )
    return [row[0] for row in rows]


def list_user_bookings(db: Session, user_id: int) -> list[Booking]:
    return (
        db.query(Booking)
        .options(joinedload(Booking.turf), joinedload(Booking.kit))
        .filter(Booking.user_id == user_id)
        .order_by(Booking.start_time.desc(), Booking.id.desc())
        .all()
    )


def count_confirmed_for_slot(db: Session, *, turf_id: int, start_time: datetime) -> int:
    return (
        db.query(Booking.id)
        .filter(Booking.turf_id == turf_id)
        .filter(Booking.start_time == start_time)
        .filter(Booking.status == BOOKING_STATUS_CONFIRMED)
        .count()
    )
