"""
SQLAlchemy models for the record store.

Usage:
    from core.models import Result, Student
"""

from .base import Base
from .result import Result
from .student import Student

__all__ = [
    "Base",
    "Result",
    "Student",
]
