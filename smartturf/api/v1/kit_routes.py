"""API routes for equipment kits."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from smartturf.core.security import get_current_user_id
from smartturf.dependencies import get_db
from smartturf.schemas import KitCreate, KitResponse
from smartturf.services import CatalogService, QueryService

router = APIRouter(tags=["kits"])


@router.get("/kits", response_model=List[KitResponse])
def list_kits(db: Session = Depends(get_db)):
    """Retrieve kits that can currently be rented."""

    return QueryService(db).list_available_kits()


@router.post("/kits", response_model=KitResponse, status_code=status.HTTP_201_CREATED)
def create_kit(
    kit_in: KitCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    """Register a kit owned by the caller."""

    return CatalogService(db).create_kit(user_id, kit_in)
