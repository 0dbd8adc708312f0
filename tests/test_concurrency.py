import threading
from concurrent.futures import ThreadPoolExecutor

from smartturf.core.exceptions import ConflictError, MatchFullError, SlotAlreadyBookedError
from smartturf.repository import booking_repository, match_repository
from smartturf.models import Turf
from smartturf.services import BookingService, MatchService

WORKERS = 8


def _run_in_parallel(database, worker, count=WORKERS):
    barrier = threading.Barrier(count)

    def _task(index):
        db = database.session()
        try:
            barrier.wait()
            return worker(db, index)
        finally:
            db.close()

    with ThreadPoolExecutor(max_workers=count) as pool:
        return list(pool.map(_task, range(count)))


def test_parallel_reservations_yield_one_booking(database, make_turf, next_week):
    turf = make_turf()
    start = next_week.replace(hour=19)

    def _reserve(db, index):
        try:
            BookingService(db).reserve(user_id=100 + index, turf_id=turf.id, start_time=start)
        except SlotAlreadyBookedError:
            return "conflict"
        return "booked"

    outcomes = _run_in_parallel(database, _reserve)

    assert outcomes.count("booked") == 1
    assert outcomes.count("conflict") == WORKERS - 1

    with database.session() as check:
        assert (
            booking_repository.count_confirmed_for_slot(check, turf_id=turf.id, start_time=start)
            == 1
        )


def test_parallel_joins_never_overfill(database, session, make_turf, next_week):
    turf = make_turf()
    match = MatchService(session).create_match(
        organizer_id=1,
        turf_id=turf.id,
        sport="Football",
        match_time=next_week,
        players_needed=4,
    )
    match_id = match.id
    session.close()

    def _join(db, index):
        try:
            MatchService(db).join_match(match_id=match_id, user_id=200 + index)
        except MatchFullError:
            return "full"
        except ConflictError:
            return "conflict"
        return "joined"

    outcomes = _run_in_parallel(database, _join)

    assert outcomes.count("joined") == 3
    assert outcomes.count("full") == WORKERS - 3

    with database.session() as check:
        assert match_repository.count_participants(check, match_id) == 4
        assert match_repository.get_match(check, match_id).status == "full"


def test_open_reader_does_not_block_a_writer(database, make_turf, next_week):
    turf = make_turf()
    start = next_week.replace(hour=7)

    reader = database.session()
    try:
        assert reader.query(Turf).filter(Turf.id == turf.id).one().name == turf.name
        assert reader.in_transaction()

        writer = database.session()
        try:
            booking = BookingService(writer).reserve(
                user_id=5, turf_id=turf.id, start_time=start
            )
        finally:
            writer.close()
    finally:
        reader.close()

    assert booking.id is not None
    with database.session() as check:
        assert (
            booking_repository.count_confirmed_for_slot(check, turf_id=turf.id, start_time=start)
            == 1
        )
