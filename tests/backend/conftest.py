from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from backend.app.database import get_db
from backend.app.dependencies import get_cache
from backend.app.main import create_app


@pytest.fixture
def test_app_client(test_db, fake_cache) -> Iterator[tuple[TestClient, sessionmaker]]:
    TestingSessionLocal, engine = test_db

    app = create_app()

    def override_get_db() -> Iterator[Session]:
        db = TestingSessionLocal()
        try:
            yield db
            db.commit()  # Auto-commit on success like production
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cache] = lambda: fake_cache

    with TestClient(app) as client:
        yield client, TestingSessionLocal


@pytest.fixture
def seeded_client(test_app_client, alice_record) -> Iterator[tuple[TestClient, sessionmaker]]:
    client, TestingSessionLocal = test_app_client
    from core.repositories import ResultRepository, StudentRepository

    session = TestingSessionLocal()
    ResultRepository(session).insert(alice_record)
    StudentRepository(session).insert(
        {"id": "S101", "name": "Alice", "email": "alice@example.com", "dob": "2004-05-06", "gender": "Female"}
    )
    session.close()

    yield client, TestingSessionLocal
