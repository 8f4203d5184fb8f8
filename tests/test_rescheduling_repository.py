"""
Tests for the reschedule request repository.
"""

import threading
import uuid

import pytest
from sqlalchemy.orm import sessionmaker

from app.database import Base, build_engine
from app.domain.rescheduling.repository import ReschedulingRequestRepository
from app.models import ReschedulingRequest
from app.shared.exceptions import ConflictError, NotFoundError, ValidationError

from .factories import seed_data


def test_create_persists_request(db, seed):
    repo = ReschedulingRequestRepository(db)

    request = repo.create(seed.b1, seed.d2, seed.s5)

    assert request.id
    assert request.current_booking_id == seed.b1
    assert request.requested_date_id == seed.d2
    assert request.requested_slot_id == seed.s5
    assert repo.find_by_booking(seed.b1).id == request.id


def test_create_rejects_second_request_for_same_booking(db, seed):
    repo = ReschedulingRequestRepository(db)
    repo.create(seed.b1, seed.d2, seed.s5)

    with pytest.raises(ConflictError):
        repo.create(seed.b1, seed.d2, seed.s6)

    # The session is usable again and the first request is untouched
    assert len(repo.find_all()) == 1
    assert repo.find_by_booking(seed.b1).requested_slot_id == seed.s5


def test_create_for_unknown_booking_is_not_a_conflict(db, seed):
    repo = ReschedulingRequestRepository(db)

    with pytest.raises(NotFoundError) as exc_info:
        repo.create(str(uuid.uuid4()), seed.d2, seed.s5)

    assert exc_info.value.code == "booking_not_found"


@pytest.mark.parametrize("field", ["booking", "date", "slot"])
def test_create_rejects_malformed_ids(db, seed, field):
    repo = ReschedulingRequestRepository(db)
    ids = {"booking": seed.b1, "date": seed.d2, "slot": seed.s5}
    ids[field] = "not-an-id"

    with pytest.raises(ValidationError):
        repo.create(ids["booking"], ids["date"], ids["slot"])

    assert repo.find_all() == []


def test_find_by_expert_filters_on_booking_owner(db, seed):
    repo = ReschedulingRequestRepository(db)
    repo.create(seed.b1, seed.d2, seed.s5)
    repo.create(seed.b2, seed.d2, seed.s6)
    repo.create(seed.b3, seed.d3, seed.s7)

    alice_requests = repo.find_by_expert(seed.alice)
    bob_requests = repo.find_by_expert(seed.bob)

    assert {r.current_booking_id for r in alice_requests} == {seed.b1, seed.b2}
    assert [r.current_booking_id for r in bob_requests] == [seed.b3]


def test_find_by_expert_unknown_expert(db, seed):
    repo = ReschedulingRequestRepository(db)

    with pytest.raises(NotFoundError) as exc_info:
        repo.find_by_expert(str(uuid.uuid4()))

    assert exc_info.value.code == "expert_not_found"


def test_delete_by_booking_is_idempotent(db, seed):
    repo = ReschedulingRequestRepository(db)
    repo.create(seed.b1, seed.d2, seed.s5)

    assert repo.delete_by_booking(seed.b1) == 1
    db.commit()
    assert repo.delete_by_booking(seed.b1) == 0
    db.commit()
    assert repo.find_by_booking(seed.b1) is None


def test_concurrent_creates_only_one_wins(tmp_path):
    """Two sessions inserting for the same booking at once: the database picks one."""
    engine = build_engine(f"sqlite:///{tmp_path / 'race.db'}")
    Base.metadata.create_all(bind=engine)
    Session = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    seed_session = Session()
    seed = seed_data(seed_session)
    seed_session.close()

    barrier = threading.Barrier(2)
    outcomes = []
    lock = threading.Lock()

    def submit(slot_id):
        session = Session()
        try:
            repo = ReschedulingRequestRepository(session)
            barrier.wait()
            try:
                repo.create(seed.b1, seed.d2, slot_id)
                result = "created"
            except ConflictError:
                result = "conflict"
            with lock:
                outcomes.append(result)
        finally:
            session.close()

    threads = [threading.Thread(target=submit, args=(s,)) for s in (seed.s5, seed.s6)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert sorted(outcomes) == ["conflict", "created"]

    check = Session()
    try:
        assert check.query(ReschedulingRequest).filter_by(current_booking_id=seed.b1).count() == 1
    finally:
        check.close()
        engine.dispose()
