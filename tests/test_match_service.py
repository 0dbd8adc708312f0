from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from smartturf.core.exceptions import (
    AlreadyJoinedError,
    InvalidInputError,
    MatchFullError,
    NotFoundError,
)
from smartturf.models.match import MATCH_STATUS_FULL, MATCH_STATUS_OPEN
from smartturf.repository import match_repository
from smartturf.services import MatchService, QueryService
from smartturf.services.match_service import status_for_roster

FIXED_NOW = datetime(2030, 1, 1, 12, tzinfo=timezone.utc)


@pytest.fixture
def service(session):
    return MatchService(session, clock=lambda: FIXED_NOW)


def _create(service, turf, organizer_id=1, players_needed=3, **overrides):
    values = {
        "organizer_id": organizer_id,
        "turf_id": turf.id,
        "sport": "Football",
        "match_time": FIXED_NOW + timedelta(days=2),
        "players_needed": players_needed,
        "contribution_per_person": Decimal("200.00"),
    }
    values.update(overrides)
    return service.create_match(**values)


def test_status_for_roster():
    assert status_for_roster(1, 3) == MATCH_STATUS_OPEN
    assert status_for_roster(3, 3) == MATCH_STATUS_FULL
    assert status_for_roster(4, 3) == MATCH_STATUS_FULL


def test_organizer_is_first_participant(service, make_turf):
    turf = make_turf()

    match = _create(service, turf, organizer_id=11)

    assert match.status == MATCH_STATUS_OPEN
    assert match.current_players == 1
    assert [p.user_id for p in match.participants] == [11]
    assert match.turf.name == turf.name


def test_single_player_match_starts_full(service, make_turf):
    match = _create(service, make_turf(), players_needed=1)

    assert match.status == MATCH_STATUS_FULL
    assert match.current_players == 1


def test_sport_is_trimmed(service, make_turf):
    match = _create(service, make_turf(), sport="  Cricket ")

    assert match.sport == "Cricket"


@pytest.mark.parametrize(
    "overrides",
    [
        {"players_needed": 0},
        {"contribution_per_person": Decimal("-1")},
        {"sport": "   "},
        {"match_time": FIXED_NOW - timedelta(minutes=1)},
    ],
)
def test_invalid_match_requests(service, make_turf, overrides):
    turf = make_turf()

    with pytest.raises(InvalidInputError):
        _create(service, turf, **overrides)


def test_unknown_turf(service, make_turf):
    with pytest.raises(NotFoundError):
        _create(service, make_turf(), turf_id=999)


def test_join_until_full(service, make_turf):
    match = _create(service, make_turf(), organizer_id=1, players_needed=3)

    service.join_match(match_id=match.id, user_id=2)
    assert service.get_match(match.id).status == MATCH_STATUS_OPEN

    participant = service.join_match(match_id=match.id, user_id=3)
    assert participant.user_id == 3
    assert participant.match_id == match.id

    refreshed = service.get_match(match.id)
    assert refreshed.status == MATCH_STATUS_FULL
    assert refreshed.current_players == 3

    with pytest.raises(MatchFullError):
        service.join_match(match_id=match.id, user_id=4)
    assert match_repository.count_participants(service.db, match.id) == 3


def test_duplicate_join_is_rejected(service, make_turf):
    match = _create(service, make_turf(), organizer_id=1, players_needed=4)
    service.join_match(match_id=match.id, user_id=2)

    with pytest.raises(AlreadyJoinedError):
        service.join_match(match_id=match.id, user_id=2)

    with pytest.raises(AlreadyJoinedError):
        service.join_match(match_id=match.id, user_id=1)

    assert match_repository.count_participants(service.db, match.id) == 2


def test_join_unknown_match(service):
    with pytest.raises(NotFoundError):
        service.join_match(match_id=12345, user_id=2)


def test_get_unknown_match(service):
    with pytest.raises(NotFoundError):
        service.get_match(12345)


def test_open_listing_hides_full_matches(service, session, make_turf):
    turf = make_turf(name="Sunset Turf")
    later = _create(service, turf, players_needed=2, match_time=FIXED_NOW + timedelta(days=5))
    sooner = _create(service, turf, players_needed=3, match_time=FIXED_NOW + timedelta(days=1))
    full = _create(service, turf, players_needed=2)
    service.join_match(match_id=full.id, user_id=9)

    listed = QueryService(session).list_open_matches()

    assert [item["id"] for item in listed] == [sooner.id, later.id]
    assert all(item["turf_name"] == "Sunset Turf" for item in listed)
    assert all(item["current_players"] == 1 for item in listed)
