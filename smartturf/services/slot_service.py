from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import List, Optional

from sqlalchemy.orm import Session

from smartturf.core.config import Settings, settings as default_settings
from smartturf.core.exceptions import NotFoundError
from smartturf.core.time_utils import as_utc, format_hour_label, utc_day_bounds
from smartturf.repository import booking_repository, turf_repository


class SlotService:
    """Derives the hourly slot grid of a turf for one UTC day."""

    def __init__(self, db: Session, config: Optional[Settings] = None):
        self.db = db
        self.config = config or default_settings

    @property
    def operating_hours(self) -> range:
        return range(self.config.SLOT_OPEN_HOUR, self.config.SLOT_CLOSE_HOUR)

    def compute_slots(self, turf_id: int, target_date: date) -> List[dict]:
        if turf_repository.get_turf(self.db, turf_id) is None:
            raise NotFoundError(f"Turf {turf_id} not found")

        day_start, day_end = utc_day_bounds(target_date)
        booked_hours = {
            as_utc(start_time).hour
            for start_time in booking_repository.list_confirmed_start_times(
                self.db,
                turf_id=turf_id,
                range_start=day_start,
                range_end=day_end,
            )
        }

        slots: List[dict] = []
        for hour in self.operating_hours:
            slot_start: datetime = day_start + timedelta(hours=hour)
            slots.append(
                {
                    "time": format_hour_label(hour),
                    "full_time": f"{hour:02d}:00",
                    "start_time": slot_start,
                    "available": hour not in booked_hours,
                }
            )
        return slots
