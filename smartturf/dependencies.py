"""Shared dependencies for the booking service."""

from collections.abc import Iterator

from fastapi import Request
from sqlalchemy.orm import Session

from smartturf.core.config import Settings
from smartturf.core.database import Database


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_config(request: Request) -> Settings:
    return request.app.state.config


def get_db(request: Request) -> Iterator[Session]:
    """Provide a session bound to the application's database for one request."""

    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
