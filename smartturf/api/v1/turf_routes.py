"""API routes for turfs."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from smartturf.core.security import get_current_user_id
from smartturf.dependencies import get_db
from smartturf.schemas import TurfCreate, TurfResponse
from smartturf.services import CatalogService, QueryService

router = APIRouter(tags=["turfs"])


@router.get("/turfs", response_model=List[TurfResponse])
def list_turfs(db: Session = Depends(get_db)):
    """Retrieve all turfs, best rated first."""

    return QueryService(db).list_turfs()


@router.post("/turfs", response_model=TurfResponse, status_code=status.HTTP_201_CREATED)
def create_turf(
    turf_in: TurfCreate,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
):
    return CatalogService(db).create_turf(turf_in)
