from datetime import timedelta
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from smartturf.core.config import settings
from smartturf.core.database import Database
from smartturf.core.time_utils import utc_now
from smartturf.main import create_app
from smartturf.models import Kit, Turf


def make_token(user_id, **claims) -> str:
    payload = {"sub": str(user_id), "exp": utc_now() + timedelta(hours=1)}
    payload.update(claims)
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def auth_headers(user_id) -> dict:
    return {"Authorization": f"Bearer {make_token(user_id)}"}


@pytest.fixture
def database(tmp_path):
    db = Database(f"sqlite:///{tmp_path / 'smart_turf_test.db'}")
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def session(database):
    db = database.session()
    yield db
    db.close()


@pytest.fixture
def client(database):
    app = create_app(database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_turf(session):
    def _make_turf(name="Green Arena", price_per_hour="1000.00", rating="0", **extra):
        turf = Turf(
            name=name,
            location=extra.pop("location", "Andheri West, Mumbai"),
            price_per_hour=Decimal(price_per_hour),
            rating=Decimal(rating),
            **extra,
        )
        session.add(turf)
        session.commit()
        return turf

    return _make_turf


@pytest.fixture
def make_kit(session):
    def _make_kit(name="Football Kit", price_per_hour="150.00", available=True, owner_id=1):
        kit = Kit(
            name=name,
            description="5 bibs, 2 balls, cones",
            price_per_hour=Decimal(price_per_hour),
            available=available,
            owner_id=owner_id,
        )
        session.add(kit)
        session.commit()
        return kit

    return _make_kit


@pytest.fixture
def next_week():
    return (utc_now() + timedelta(days=7)).replace(minute=0, second=0, microsecond=0)
