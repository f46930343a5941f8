"""
Shared fixtures: an in-memory SQLite database per test.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tracker.db import Base, init_db
from tracker.models import Parcel, ParcelStatus
from tracker.service import ParcelService
from tracker.store import ParcelStore

TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture
def engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    return ParcelStore(db)


@pytest.fixture
def service(store):
    return ParcelService(store)


@pytest.fixture
def make_parcel():
    def _make(**overrides):
        fields = {
            "client": 1000,
            "status": ParcelStatus.registered,
            "address": "test",
            "created_at": "2024-01-01T00:00:00Z",
        }
        fields.update(overrides)
        return Parcel(**fields)
    return _make
