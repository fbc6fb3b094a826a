"""Student profile repository."""

from typing import Any

from core.models import Student

from .base import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """Record store for student profiles."""

    model = Student
    kind = "student"

    def list_profiles(self, limit: int = 100, offset: int = 0) -> list[dict[str, Any]]:
        return [row.to_dict() for row in self.get_all(limit=limit, offset=offset)]

    def insert(self, profile: dict[str, Any]) -> int:
        row = self._insert(
            profile["id"],
            name=profile["name"],
            email=profile.get("email"),
            dob=profile.get("dob"),
            gender=profile.get("gender"),
        )
        return row.id
