"""
Student profile service functions.
"""

from datetime import date
from typing import Any

from core.errors import ValidationError
from core.repositories import StudentRepository

PROFILE_FIELDS = ("id", "name", "email", "dob", "gender")

# Column widths of the students table
FIELD_MAX_LENGTHS = {"id": 64, "name": 255, "email": 255, "gender": 32}


def _is_iso_date(value: str) -> bool:
    if len(value) != 10:
        return False
    try:
        date.fromisoformat(value)
    except ValueError:
        return False
    return True


def validate_student_profile(profile: Any) -> dict[str, Any]:
    """
    Require id and name, check optional fields, and keep only known fields.

    dob must be an ISO date (YYYY-MM-DD) when given.
    """
    if not isinstance(profile, dict):
        raise ValidationError(["profile must be an object"])

    errors = []
    for field in ("id", "name"):
        value = profile.get(field)
        if not isinstance(value, str) or not value.strip():
            errors.append(f"{field} is required")
    for field in ("email", "dob", "gender"):
        value = profile.get(field)
        if value is not None and not isinstance(value, str):
            errors.append(f"{field} must be a string")

    for field, max_length in FIELD_MAX_LENGTHS.items():
        value = profile.get(field)
        if isinstance(value, str) and len(value) > max_length:
            errors.append(f"{field} must be at most {max_length} characters")

    dob = profile.get("dob")
    if isinstance(dob, str) and not _is_iso_date(dob):
        errors.append("dob must be an ISO date (YYYY-MM-DD)")

    if errors:
        raise ValidationError(errors)

    return {field: profile.get(field) for field in PROFILE_FIELDS}


def list_students(repo: StudentRepository, limit: int = 100, offset: int = 0) -> list[dict[str, Any]]:
    """Fetch student profiles in insertion order."""
    return repo.list_profiles(limit=limit, offset=offset)


def add_student(repo: StudentRepository, profile: Any) -> int:
    """Validate and persist a student profile, returning its storage key."""
    return repo.insert(validate_student_profile(profile))
