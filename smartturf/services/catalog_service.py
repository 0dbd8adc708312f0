import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from smartturf.core.database import begin_write
from smartturf.core.exceptions import InternalError
from smartturf.models.kit import Kit
from smartturf.models.turf import Turf
from smartturf.repository import kit_repository, turf_repository
from smartturf.schemas.kit import KitCreate
from smartturf.schemas.turf import TurfCreate

logger = logging.getLogger(__name__)


class CatalogService:
    """Registers turfs and kits that bookings and matches refer to."""

    def __init__(self, db: Session):
        self.db = db

    def create_turf(self, turf_in: TurfCreate) -> Turf:
        turf_data = turf_in.model_dump()
        turf_data["rating"] = 0
        try:
            begin_write(self.db)
            turf = turf_repository.create_turf(self.db, turf_data)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to create turf %r", turf_in.name)
            raise InternalError("Failed to add new turf.") from exc
        self.db.refresh(turf)
        return turf

    def create_kit(self, owner_id: int, kit_in: KitCreate) -> Kit:
        kit_data = kit_in.model_dump()
        kit_data.update(owner_id=owner_id, available=True)
        try:
            begin_write(self.db)
            kit = kit_repository.create_kit(self.db, kit_data)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Failed to create kit %r for owner %s", kit_in.name, owner_id)
            raise InternalError("Failed to add new kit.") from exc
        self.db.refresh(kit)
        return kit
