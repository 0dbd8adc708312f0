from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone


def as_utc(value: datetime) -> datetime:
    """Return ``value`` as an aware UTC datetime; naive values are taken as UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_day_bounds(target_date: date) -> tuple[datetime, datetime]:
    start = datetime.combine(target_date, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def is_hour_aligned(value: datetime) -> bool:
    return value.minute == 0 and value.second == 0 and value.microsecond == 0


def format_hour_label(hour: int) -> str:
    """Render an hour of the day as a 12-hour clock label, e.g. ``6:00 AM``."""

    display_hour = hour % 12 or 12
    suffix = "AM" if hour < 12 else "PM"
    return f"{display_hour}:00 {suffix}"


__all__ = [
    "as_utc",
    "utc_now",
    "utc_day_bounds",
    "is_hour_aligned",
    "format_hour_label",
]
