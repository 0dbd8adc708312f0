from __future__ import annotations

from typing import Optional

from sqlalchemy.orm import Session

from smartturf.models.kit import Kit


def get_kit(db: Session, kit_id: int) -> Optional[Kit]:
    return db.query(Kit).filter(Kit.id == kit_id).first()


def list_available_kits(db: Session) -> list[Kit]:
    return (
        db.query(Kit)
        .filter(Kit.available.is_(True))
        .order_by(Kit.name.asc())
        .all()
    )


def create_kit(db: Session, kit_data: dict) -> Kit:
    kit = Kit(**kit_data)
    db.add(kit)
    db.flush([kit])
    return kit
