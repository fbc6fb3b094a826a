"""
Repository pattern implementations for record store access.

Usage:
    from core.repositories import ResultRepository
    from core.db import db

    with db.session() as session:
        record = ResultRepository(session).find_by_identifier("S101")
"""

from .base import BaseRepository
from .result_repository import ResultRepository
from .student_repository import StudentRepository

__all__ = [
    "BaseRepository",
    "ResultRepository",
    "StudentRepository",
]
