"""
Shared fixtures: an in-memory database per test, seeded with two experts,
their dates/slots and a handful of bookings.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.database import Base, build_engine, get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.models import Expert  # noqa: E402

from .factories import seed_data  # noqa: E402


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: skip the lifespan so the configured database is never touched
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def seed(db):
    return seed_data(db)


@pytest.fixture
def lonely_expert(db):
    """An expert with no bookings at all"""
    carol = Expert(username="carol", fullname="Carol White")
    db.add(carol)
    db.commit()
    return carol.id
