"""Base repository class with common record store operations."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from core.db import Base
from core.errors import DuplicateRecordError, StoreUnavailableError
from core.logging import get_logger

T = TypeVar("T", bound=Base)

logger = get_logger("database")


class BaseRepository(Generic[T]):
    """
    Base repository keyed by an externally assigned student identifier.

    Every SQLAlchemy failure is re-raised as StoreUnavailableError so callers
    only deal with the application error taxonomy.

    Usage:
        class ResultRepository(BaseRepository[Result]):
            model = Result
            kind = "result"

        repo = ResultRepository(session)
        row = repo.get_by_identifier("S101")
    """

    model: type[T]
    kind: str = "record"

    def __init__(self, session: Session):
        self.session = session

    @contextmanager
    def _store_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error("store_operation_failed", kind=self.kind, operation=operation, error=str(e))
            raise StoreUnavailableError(f"{self.kind} store {operation} failed") from e

    def get_by_identifier(self, student_id: str) -> T | None:
        """Get a single row by student identifier."""
        with self._store_errors("find"):
            return self.session.scalars(
                select(self.model).where(self.model.student_id == student_id)  # type: ignore[attr-defined]
            ).first()

    def get_all(self, limit: int = 100, offset: int = 0) -> list[T]:
        """Get rows ordered by insertion, with pagination."""
        with self._store_errors("list"):
            return list(
                self.session.scalars(
                    select(self.model)
                    .order_by(self.model.id)  # type: ignore[attr-defined]
                    .offset(offset)
                    .limit(limit)
                )
            )

    def count_all(self) -> int:
        """Total number of rows."""
        with self._store_errors("count"):
            return self.session.scalar(select(func.count()).select_from(self.model)) or 0

    def existing_identifiers(self, student_ids: list[str]) -> set[str]:
        """Subset of student_ids that already have a row."""
        if not student_ids:
            return set()
        with self._store_errors("find"):
            return set(
                self.session.scalars(
                    select(self.model.student_id).where(  # type: ignore[attr-defined]
                        self.model.student_id.in_(student_ids)  # type: ignore[attr-defined]
                    )
                )
            )

    def _insert(self, student_id: str, **kwargs: Any) -> T:
        """
        Insert and commit a new row.

        Records are write-once: a second insert for the same identifier is
        rejected with DuplicateRecordError instead of overwriting.
        """
        instance = self.model(student_id=student_id, **kwargs)
        try:
            self.session.add(instance)
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            raise DuplicateRecordError(self.kind, student_id) from e
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error("store_operation_failed", kind=self.kind, operation="insert", error=str(e))
            raise StoreUnavailableError(f"{self.kind} store insert failed") from e
        return instance

    def bulk_insert(self, rows: list[dict[str, Any]], commit: bool = True) -> int:
        """
        Insert many rows. Used by the seeding command.

        With commit=False the rows are only flushed, so several repositories
        can share one transaction that the caller finishes with commit().
        """
        if not rows:
            return 0
        with self._store_errors("bulk_insert"):
            try:
                self.session.add_all([self.model(**row) for row in rows])
                if commit:
                    self.session.commit()
                else:
                    self.session.flush()
            except SQLAlchemyError:
                self.session.rollback()
                raise
        return len(rows)

    def commit(self) -> None:
        """Commit the session, rolling back on failure."""
        with self._store_errors("commit"):
            try:
                self.session.commit()
            except SQLAlchemyError:
                self.session.rollback()
                raise
