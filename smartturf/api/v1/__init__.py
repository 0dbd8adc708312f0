from fastapi import APIRouter

from .booking_routes import router as booking_router
from .kit_routes import router as kit_router
from .match_routes import router as match_router
from .turf_routes import router as turf_router

router = APIRouter()
router.include_router(turf_router)
router.include_router(kit_router)
router.include_router(booking_router)
router.include_router(match_router)

__all__ = [
    "router",
    "booking_router",
    "kit_router",
    "match_router",
    "turf_router",
]
