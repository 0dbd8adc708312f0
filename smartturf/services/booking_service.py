import logging
from datetime import datetime, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from smartturf.core.config import Settings, settings as default_settings
from smartturf.core.database import begin_write
from smartturf.core.exceptions import (
    InternalError,
    InvalidInputError,
    KitUnavailableError,
    NotFoundError,
    SlotAlreadyBookedError,
    SmartTurfError,
)
from smartturf.core.time_utils import as_utc, is_hour_aligned
from smartturf.models.booking import BOOKING_STATUS_CONFIRMED, Booking
from smartturf.models.kit import Kit
from smartturf.models.turf import Turf
from smartturf.repository import booking_repository, kit_repository, turf_repository

logger = logging.getLogger(__name__)

SLOT_DURATION = timedelta(hours=1)
_CENTS = Decimal("0.01")


class BookingService:
    """Reservation ledger: creates bookings atomically, one confirmed booking per slot."""

    def __init__(self, db: Session, config: Optional[Settings] = None):
        self.db = db
        self.config = config or default_settings

    def _get_turf(self, turf_id: int) -> Turf:
        turf = turf_repository.get_turf(self.db, turf_id)
        if turf is None:
            raise NotFoundError(f"Turf {turf_id} not found")
        return turf

    def _get_available_kit(self, kit_id: int) -> Kit:
        kit = kit_repository.get_kit(self.db, kit_id)
        if kit is None:
            raise NotFoundError(f"Kit {kit_id} not found")
        if not kit.available:
            raise KitUnavailableError(f"Kit {kit_id} is not available")
        return kit

    def _ensure_slot_free(self, turf_id: int, start_time: datetime) -> None:
        if booking_repository.count_confirmed_for_slot(
            self.db, turf_id=turf_id, start_time=start_time
        ):
            raise SlotAlreadyBookedError()

    def _normalize_start_time(self, start_time: datetime) -> datetime:
        start_time = as_utc(start_time)
        if not is_hour_aligned(start_time):
            raise InvalidInputError("start_time must be aligned to the hour (e.g. 10:00)")

        if not self.config.SLOT_OPEN_HOUR <= start_time.hour < self.config.SLOT_CLOSE_HOUR:
            raise InvalidInputError(
                "start_time must fall within operating hours "
                f"({self.config.SLOT_OPEN_HOUR:02d}:00 - {self.config.SLOT_CLOSE_HOUR:02d}:00 UTC)"
            )
        return start_time

    @staticmethod
    def calculate_total_price(turf: Turf, kit: Optional[Kit] = None) -> Decimal:
        total = Decimal(turf.price_per_hour)
        if kit is not None:
            total += Decimal(kit.price_per_hour)
        return total.quantize(_CENTS, rounding=ROUND_HALF_UP)

    def reserve(
        self,
        *,
        user_id: int,
        turf_id: int,
        start_time: datetime,
        kit_id: Optional[int] = None,
    ) -> Booking:
        start_time = self._normalize_start_time(start_time)

        try:
            begin_write(self.db)
            turf = self._get_turf(turf_id)
            kit = self._get_available_kit(kit_id) if kit_id is not None else None
            self._ensure_slot_free(turf.id, start_time)

            booking = booking_repository.create_booking(
                self.db,
                {
                    "user_id": user_id,
                    "turf_id": turf.id,
                    "kit_id": kit.id if kit is not None else None,
                    "start_time": start_time,
                    "end_time": start_time + SLOT_DURATION,
                    "total_price": self.calculate_total_price(turf, kit),
                    "status": BOOKING_STATUS_CONFIRMED,
                },
            )
            self.db.commit()
        except SmartTurfError:
            self.db.rollback()
            raise
        except IntegrityError as exc:
            self.db.rollback()
            logger.info(
                "Slot conflict for turf %s at %s (user %s)",
                turf_id,
                start_time.isoformat(),
                user_id,
            )
            raise SlotAlreadyBookedError() from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception(
                "Failed to create booking for user %s on turf %s at %s",
                user_id,
                turf_id,
                start_time.isoformat(),
            )
            raise InternalError("Failed to create booking.") from exc

        self.db.refresh(booking)
        logger.info(
            "Booking %s confirmed for user %s on turf %s at %s",
            booking.id,
            user_id,
            turf_id,
            start_time.isoformat(),
        )
        return booking
