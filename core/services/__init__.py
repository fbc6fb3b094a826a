"""
Core services.

Usage:
    from core.services import ResultService
"""

from . import student_service
from .ports import LookupCache, RecordStore
from .result_service import ResultService, validate_result_record

__all__ = [
    "LookupCache",
    "RecordStore",
    "ResultService",
    "validate_result_record",
    "student_service",
]
