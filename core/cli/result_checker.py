"""
Result Checker CLI.

Seeds the record store with fake students and results, and offers a few
maintenance commands that go through the same repositories and services as
the HTTP API.
"""

import argparse
import json
import sys
from datetime import date
from typing import Any

from dotenv import load_dotenv
from faker import Faker

from core.cache import cache
from core.config import get_settings
from core.db import db
from core.errors import NotFoundError, ResultCheckerError
from core.logging import LogContext, get_logger, log_timing
from core.repositories import ResultRepository, StudentRepository
from core.services import ResultService

load_dotenv()

logger = get_logger("cli")

SUBJECTS = (
    "Math",
    "English",
    "Physics",
    "Chemistry",
    "Biology",
    "History",
    "Geography",
    "Computer",
    "Economics",
    "Bangla",
)
GENDERS = ("Male", "Female", "Non-binary")
SCORE_MIN = 50
SCORE_MAX = 100
DOB_START = date(1995, 1, 1)
DOB_END = date(2010, 12, 31)
ID_OFFSET = 100


def student_identifier(n: int) -> str:
    """Identifier of the n-th seeded student (1-based): S101, S102, ..."""
    return f"S{ID_OFFSET + n}"


def generate_batch(
    fake: Faker, start: int, size: int
) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """
    Generate student and result rows for students start .. start + size - 1.

    Returns:
        Tuple of (student rows, result rows) ready for bulk insertion
    """
    students = []
    results = []
    for n in range(start, start + size):
        student_id = student_identifier(n)
        name = fake.name()
        students.append(
            {
                "student_id": student_id,
                "name": name,
                "email": fake.email(),
                "dob": fake.date_between(start_date=DOB_START, end_date=DOB_END).isoformat(),
                "gender": fake.random_element(GENDERS),
            }
        )
        results.append(
            {
                "student_id": student_id,
                "name": name,
                "subjects": {
                    subject: fake.random_int(min=SCORE_MIN, max=SCORE_MAX) for subject in SUBJECTS
                },
            }
        )
    return students, results


@log_timing("seed_database", logger=logger)
def seed_database(session, total: int, batch_size: int, fake: Faker) -> int:
    """
    Insert `total` students and results in batches.

    Does nothing when either table already holds `total` rows. Identifiers
    that already exist in a table are skipped, so a partial earlier run or a
    profile added through the API does not stop seeding. Each batch's
    students and results are committed together.

    Returns:
        Number of students inserted
    """
    students_repo = StudentRepository(session)
    results_repo = ResultRepository(session)

    students_count = students_repo.count_all()
    results_count = results_repo.count_all()
    if students_count >= total or results_count >= total:
        logger.info(
            "seed_skipped", students=students_count, results=results_count, total=total
        )
        return 0

    inserted = 0
    with LogContext(operation="seed", total=total, batch_size=batch_size):
        current = 1
        while current <= total:
            size = min(batch_size, total - current + 1)
            students, results = generate_batch(fake, current, size)
            batch_ids = [row["student_id"] for row in students]
            existing_students = students_repo.existing_identifiers(batch_ids)
            existing_results = results_repo.existing_identifiers(batch_ids)
            new_students = [row for row in students if row["student_id"] not in existing_students]
            new_results = [row for row in results if row["student_id"] not in existing_results]

            students_repo.bulk_insert(new_students, commit=False)
            results_repo.bulk_insert(new_results, commit=False)
            results_repo.commit()

            if existing_students or existing_results:
                logger.info(
                    "seed_existing_skipped",
                    students=len(existing_students),
                    results=len(existing_results),
                )
            current += size
            inserted += len(new_students)
            logger.info("seed_batch_inserted", up_to=current - 1)
    return inserted


def cmd_init_db(args):
    """Create the students and results tables."""
    db.create_all_tables()
    print("Tables created")
    return 0


def cmd_seed(args):
    """Populate the record store with fake data."""
    settings = get_settings()
    total = args.total or settings.seed_total_records
    batch_size = args.batch_size or settings.seed_batch_size
    if total <= 0 or batch_size <= 0:
        print("--total and --batch-size must be positive", file=sys.stderr)
        return 2

    if args.create_tables:
        db.create_all_tables()

    fake = Faker()
    if args.seed is not None:
        fake.seed_instance(args.seed)

    print(f"Seeding {total} students and results in batches of {batch_size}...")
    with db.session() as session:
        inserted = seed_database(session, total, batch_size, fake)

    if inserted:
        print(f"Successfully seeded {inserted} students and results")
    else:
        print("Database already seeded with sufficient data")
    return 0


def cmd_stats(args):
    """Show row counts."""
    with db.session() as session:
        stats = {
            "students": StudentRepository(session).count_all(),
            "results": ResultRepository(session).count_all(),
        }
    print(json.dumps(stats, indent=2))
    return 0


def cmd_lookup(args):
    """Look up a result through the cache, like GET /result/{id}."""
    settings = get_settings()
    with db.session() as session:
        service = ResultService(ResultRepository(session), cache, ttl=settings.cache_ttl)
        try:
            record = service.get_result(args.student_id)
        except NotFoundError:
            print(f"Result not found: {args.student_id}", file=sys.stderr)
            return 1
    print(json.dumps(record, indent=2))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="result-checker",
        description="Result Checker - seed and inspect the student result store",
    )
    parser.add_argument("--database-url", help="Override DATABASE_URL")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("init-db", help="Create database tables")

    seed_parser = subparsers.add_parser("seed", help="Seed fake students and results")
    seed_parser.add_argument("--total", type=int, help="Number of students (default: SEED_TOTAL_RECORDS)")
    seed_parser.add_argument("--batch-size", type=int, help="Rows per insert batch (default: SEED_BATCH_SIZE)")
    seed_parser.add_argument("--seed", type=int, help="Random seed for reproducible data")
    seed_parser.add_argument("--create-tables", action="store_true", help="Create tables first")

    subparsers.add_parser("stats", help="Show record counts")

    lookup_parser = subparsers.add_parser("lookup", help="Look up a student's result")
    lookup_parser.add_argument("student_id", help="Student identifier, e.g. S101")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point with CLI interface."""
    parser = build_parser()
    args = parser.parse_args(argv)

    commands = {
        "init-db": cmd_init_db,
        "seed": cmd_seed,
        "stats": cmd_stats,
        "lookup": cmd_lookup,
    }

    if args.command not in commands:
        parser.print_help()
        return 1

    db.initialize(args.database_url)
    try:
        return commands[args.command](args)
    except ResultCheckerError as e:
        logger.error("command_failed", command=args.command, error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1
    finally:
        db.reset()


if __name__ == "__main__":
    sys.exit(main())
