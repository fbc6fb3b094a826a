"""
Pytest fixtures for Result Checker tests.

Store tests run against in-memory SQLite; cache tests use an in-process fake
with a controllable clock so TTL expiry can be exercised without sleeping.
"""

import os

# Must be set before core.config settings are first read
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("REDIS_URL", "redis://127.0.0.1:1/0")
os.environ.setdefault("REDIS_SOCKET_TIMEOUT", "0.2")
os.environ.setdefault("AUTO_CREATE_TABLES", "true")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from core.db import Base  # noqa: E402
from core import models  # noqa: F401,E402
from core.errors import CacheUnavailableError  # noqa: E402


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeCache:
    """
    In-memory LookupCache with TTL semantics.

    Set `available = False` to make every call raise CacheUnavailableError,
    like a Redis client whose server is down.
    """

    def __init__(self, clock: FakeClock):
        self.clock = clock
        self.entries: dict[str, tuple[bytes, float]] = {}
        self.available = True
        self.get_calls: list[str] = []
        self.set_calls: list[tuple[str, bytes, int]] = []

    def get(self, key: str) -> bytes | None:
        self.get_calls.append(key)
        if not self.available:
            raise CacheUnavailableError("connection refused")
        entry = self.entries.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if self.clock() >= expires_at:
            del self.entries[key]
            return None
        return value

    def set_with_expiry(self, key: str, value: bytes, ttl_seconds: int) -> bool:
        self.set_calls.append((key, value, ttl_seconds))
        if not self.available:
            raise CacheUnavailableError("connection refused")
        self.entries[key] = (value, self.clock() + ttl_seconds)
        return True

    def ttl(self, key: str) -> float | None:
        entry = self.entries.get(key)
        return None if entry is None else entry[1] - self.clock()


class FakeStore:
    """In-memory RecordStore that counts calls."""

    def __init__(self, records: dict | None = None):
        self.records: dict[str, dict] = dict(records or {})
        self.find_calls: list[str] = []
        self.insert_calls: list[dict] = []

    def find_by_identifier(self, student_id: str) -> dict | None:
        self.find_calls.append(student_id)
        record = self.records.get(student_id)
        return dict(record) if record is not None else None

    def insert(self, record: dict) -> int:
        self.insert_calls.append(record)
        self.records[record["id"]] = dict(record)
        return len(self.records)

    def count_all(self) -> int:
        return len(self.records)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_cache(clock) -> FakeCache:
    return FakeCache(clock)


@pytest.fixture
def alice_record() -> dict:
    return {"id": "S101", "name": "Alice", "subjects": {"Math": 90, "English": 85}}


@pytest.fixture
def fake_store(alice_record) -> FakeStore:
    return FakeStore({"S101": alice_record})


@pytest.fixture(scope="function")
def test_db():
    """Fresh in-memory SQLite database for each test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    yield TestingSessionLocal, engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    TestingSessionLocal, _ = test_db
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def make_store():
    """Factory for FakeStore instances seeded with the given records."""
    return FakeStore
