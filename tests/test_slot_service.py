from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from smartturf.core.config import Settings
from smartturf.core.exceptions import NotFoundError
from smartturf.models import Booking
from smartturf.models.booking import BOOKING_STATUS_CANCELLED, BOOKING_STATUS_CONFIRMED
from smartturf.services import SlotService

TARGET_DAY = date(2030, 5, 15)


class BusinessHoursSettings(Settings):
    SLOT_OPEN_HOUR = 8
    SLOT_CLOSE_HOUR = 22


def _book(session, turf, start_time, status=BOOKING_STATUS_CONFIRMED, user_id=7):
    booking = Booking(
        user_id=user_id,
        turf_id=turf.id,
        start_time=start_time,
        end_time=start_time.replace(hour=start_time.hour + 1),
        total_price=Decimal("1000.00"),
        status=status,
    )
    session.add(booking)
    session.commit()
    return booking


def test_full_grid_when_nothing_is_booked(session, make_turf):
    turf = make_turf()

    slots = SlotService(session).compute_slots(turf.id, TARGET_DAY)
    session.rollback()

    assert len(slots) == 18
    assert [slot["full_time"] for slot in slots][:3] == ["06:00", "07:00", "08:00"]
    assert slots[-1]["full_time"] == "23:00"
    assert len({slot["full_time"] for slot in slots}) == len(slots)
    assert all(slot["available"] for slot in slots)


def test_labels_use_twelve_hour_clock(session, make_turf):
    turf = make_turf()

    labels = {
        slot["full_time"]: slot["time"]
        for slot in SlotService(session).compute_slots(turf.id, TARGET_DAY)
    }
    session.rollback()

    assert labels["06:00"] == "6:00 AM"
    assert labels["12:00"] == "12:00 PM"
    assert labels["13:00"] == "1:00 PM"
    assert labels["23:00"] == "11:00 PM"


def test_operating_window_comes_from_configuration(session, make_turf):
    turf = make_turf()

    slots = SlotService(session, BusinessHoursSettings()).compute_slots(turf.id, TARGET_DAY)
    session.rollback()

    assert len(slots) == 14
    assert slots[0]["full_time"] == "08:00"
    assert slots[-1]["full_time"] == "21:00"


def test_invalid_operating_window_is_rejected():
    class BrokenSettings(Settings):
        SLOT_OPEN_HOUR = 22
        SLOT_CLOSE_HOUR = 8

    with pytest.raises(ValueError):
        BrokenSettings()


def test_confirmed_booking_marks_only_its_hour(session, make_turf):
    turf = make_turf()
    other_turf = make_turf(name="Blue Box")
    _book(session, turf, datetime(2030, 5, 15, 10, tzinfo=timezone.utc))
    _book(session, other_turf, datetime(2030, 5, 15, 11, tzinfo=timezone.utc))
    _book(session, turf, datetime(2030, 5, 16, 12, tzinfo=timezone.utc))

    slots = SlotService(session).compute_slots(turf.id, TARGET_DAY)
    session.rollback()

    unavailable = [slot["full_time"] for slot in slots if not slot["available"]]
    assert unavailable == ["10:00"]


def test_cancelled_booking_frees_the_slot(session, make_turf):
    turf = make_turf()
    _book(
        session,
        turf,
        datetime(2030, 5, 15, 18, tzinfo=timezone.utc),
        status=BOOKING_STATUS_CANCELLED,
    )

    slots = SlotService(session).compute_slots(turf.id, TARGET_DAY)
    session.rollback()

    assert all(slot["available"] for slot in slots)


def test_slot_start_times_are_utc_on_the_requested_day(session, make_turf):
    turf = make_turf()

    slots = SlotService(session).compute_slots(turf.id, TARGET_DAY)
    session.rollback()

    assert slots[0]["start_time"] == datetime(2030, 5, 15, 6, tzinfo=timezone.utc)
    assert slots[-1]["start_time"] == datetime(2030, 5, 15, 23, tzinfo=timezone.utc)


def test_unknown_turf(session):
    with pytest.raises(NotFoundError):
        SlotService(session).compute_slots(999, TARGET_DAY)
    session.rollback()
