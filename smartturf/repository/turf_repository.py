from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from smartturf.models.turf import Turf


def get_turf(db: Session, turf_id: int) -> Optional[Turf]:
    return db.query(Turf).filter(Turf.id == turf_id).first()


def list_turfs(db: Session) -> list[Turf]:
    return db.query(Turf).order_by(Turf.rating.desc(), Turf.name.asc()).all()


def create_turf(db: Session, turf_data: dict) -> Turf:
    turf = Turf(**turf_data)
    db.add(turf)
    db.flush([turf])
    return turf
