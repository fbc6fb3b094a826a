"""
Result SQLAlchemy model.

One row per student: the subject-to-score mapping lives in a JSON column so
new subjects need no schema change.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import DateTime, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Result(Base):
    """
    Exam result for a single student.

    Attributes:
        student_id: Externally assigned student identifier (e.g. "S101")
        name: Student name as recorded with the result
        subjects: Mapping of subject name to integer score
    """

    __tablename__ = "results"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    student_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    subjects: Mapped[Dict[str, int]] = mapped_column(JSON, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc)
    )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the record shape served by the API and stored in the cache."""
        return {
            "id": self.student_id,
            "name": self.name,
            "subjects": dict(self.subjects or {}),
        }
