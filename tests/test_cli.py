"""
Tests for the seeding and maintenance CLI.
"""

from datetime import date

import pytest
from faker import Faker
from sqlalchemy.exc import OperationalError

from core.cli.result_checker import (
    SUBJECTS,
    generate_batch,
    main,
    seed_database,
    student_identifier,
)
from core.db import db
from core.errors import StoreUnavailableError
from core.repositories import ResultRepository, StudentRepository


@pytest.fixture
def fake() -> Faker:
    faker = Faker()
    faker.seed_instance(1234)
    return faker


@pytest.fixture
def fresh_db_manager():
    db.reset()
    yield db
    db.reset()


def test_student_identifiers_start_at_s101():
    assert student_identifier(1) == "S101"
    assert student_identifier(20000) == "S20100"


def test_generate_batch_shapes(fake):
    students, results = generate_batch(fake, start=1, size=3)

    assert [s["student_id"] for s in students] == ["S101", "S102", "S103"]
    assert [r["student_id"] for r in results] == ["S101", "S102", "S103"]
    for student, result in zip(students, results):
        assert result["name"] == student["name"]
        assert set(result["subjects"]) == set(SUBJECTS)
        assert all(50 <= score <= 100 for score in result["subjects"].values())
        assert date(1995, 1, 1) <= date.fromisoformat(student["dob"]) <= date(2010, 12, 31)
        assert student["gender"] in ("Male", "Female", "Non-binary")


def test_seed_inserts_in_batches_and_is_skipped_when_full(test_session, fake):
    inserted = seed_database(test_session, total=25, batch_size=10, fake=fake)

    assert inserted == 25
    assert StudentRepository(test_session).count_all() == 25
    assert ResultRepository(test_session).count_all() == 25
    assert ResultRepository(test_session).find_by_identifier("S125") is not None

    assert seed_database(test_session, total=25, batch_size=10, fake=fake) == 0
    assert StudentRepository(test_session).count_all() == 25


def test_seed_skips_identifiers_that_already_exist(test_session, fake):
    StudentRepository(test_session).insert({"id": "S101", "name": "Walk-in"})
    ResultRepository(test_session).insert({"id": "S103", "name": "Early", "subjects": {"Math": 77}})

    inserted = seed_database(test_session, total=5, batch_size=5, fake=fake)

    assert inserted == 4
    assert StudentRepository(test_session).count_all() == 5
    assert ResultRepository(test_session).count_all() == 5
    assert StudentRepository(test_session).get_by_identifier("S101").name == "Walk-in"
    assert ResultRepository(test_session).find_by_identifier("S103")["subjects"] == {"Math": 77}
    assert ResultRepository(test_session).find_by_identifier("S101") is not None


def test_seed_batch_commits_students_and_results_together(test_session, fake, monkeypatch):
    def failing_bulk_insert(self, rows, commit=True):
        with self._store_errors("bulk_insert"):
            raise OperationalError("INSERT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(ResultRepository, "bulk_insert", failing_bulk_insert)

    with pytest.raises(StoreUnavailableError):
        seed_database(test_session, total=3, batch_size=3, fake=fake)

    test_session.rollback()
    assert StudentRepository(test_session).count_all() == 0


def test_seed_command_end_to_end(tmp_path, capsys, fresh_db_manager):
    url = f"sqlite:///{tmp_path / 'seed.db'}"

    code = main(["--database-url", url, "seed", "--total", "12", "--batch-size", "5", "--seed", "7", "--create-tables"])
    assert code == 0
    assert "Successfully seeded 12" in capsys.readouterr().out

    assert main(["--database-url", url, "stats"]) == 0
    out = capsys.readouterr().out
    assert '"students": 12' in out
    assert '"results": 12' in out

    assert main(["--database-url", url, "seed", "--total", "12"]) == 0
    assert "already seeded" in capsys.readouterr().out


def test_lookup_command_without_redis(tmp_path, capsys, fresh_db_manager):
    url = f"sqlite:///{tmp_path / 'lookup.db'}"
    main(["--database-url", url, "seed", "--total", "2", "--create-tables"])
    capsys.readouterr()

    assert main(["--database-url", url, "lookup", "S102"]) == 0
    out = capsys.readouterr().out
    assert '"id": "S102"' in out
    assert all(f'"{subject}":' in out for subject in SUBJECTS)

    assert main(["--database-url", url, "lookup", "S999"]) == 1


def test_missing_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out.lower()
