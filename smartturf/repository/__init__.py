"""Persistence helpers for the booking service."""

from smartturf.repository import (
    booking_repository,
    kit_repository,
    match_repository,
    turf_repository,
)

__all__ = [
    "booking_repository",
    "kit_repository",
    "match_repository",
    "turf_repository",
]
