"""Result repository: the record store behind the result lookup."""

from typing import Any

from core.models import Result

from .base import BaseRepository


class ResultRepository(BaseRepository[Result]):
    """Record store for exam results, keyed by student identifier."""

    model = Result
    kind = "result"

    def find_by_identifier(self, student_id: str) -> dict[str, Any] | None:
        """Return the stored record for a student, or None."""
        row = self.get_by_identifier(student_id)
        return row.to_dict() if row else None

    def insert(self, record: dict[str, Any]) -> int:
        """Persist a validated record and return its storage key."""
        row = self._insert(
            record["id"],
            name=record.get("name"),
            subjects=dict(record["subjects"]),
        )
        return row.id
