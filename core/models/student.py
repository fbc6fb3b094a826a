"""
Student profile SQLAlchemy model.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Student(Base):
    """
    Student profile.

    Attributes:
        student_id: Externally assigned student identifier, shared with results
        name: Full name
        email: Contact email (optional)
        dob: Date of birth as an ISO date string (optional)
        gender: Free-form gender label (optional)
    """

    __tablename__ = "students"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    student_id: Mapped[str] = mapped_column(String(64), unique=True, index=True)
    name: Mapped[str] = mapped_column(String(255))
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    dob: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc)
    )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.student_id,
            "name": self.name,
            "email": self.email,
            "dob": self.dob,
            "gender": self.gender,
        }
