"""
Cached result lookup service.

Provides the read and write paths for student results:
- get_result: cache-aside lookup (cache -> record store -> populate cache)
- put_result: persist authoritatively, then warm the cache

The cache is strictly an optimization: every cache failure is logged and
absorbed, while validation and store failures reach the caller.
"""

import json
from typing import Any

from core.cache import CacheKeys
from core.errors import CacheUnavailableError, NotFoundError, ValidationError
from core.logging import get_logger

from .ports import LookupCache, RecordStore

logger = get_logger("services.results")

# Column widths of the results table
MAX_ID_LENGTH = 64
MAX_NAME_LENGTH = 255


def validate_result_record(record: Any) -> dict[str, Any]:
    """
    Check a result record and return it in canonical form.

    The canonical form has exactly the keys id, name and subjects. Scores must
    be integers; their range is not enforced.

    Raises:
        ValidationError: If the identifier or the subject mapping is missing or malformed
    """
    if not isinstance(record, dict):
        raise ValidationError(["record must be an object"])

    errors = []
    student_id = record.get("id")
    if not isinstance(student_id, str) or not student_id.strip():
        errors.append("id is required")
    elif len(student_id) > MAX_ID_LENGTH:
        errors.append(f"id must be at most {MAX_ID_LENGTH} characters")

    subjects = record.get("subjects")
    if not isinstance(subjects, dict) or not subjects:
        errors.append("subjects must be a non-empty mapping")
    else:
        for subject, score in subjects.items():
            if not isinstance(subject, str) or not subject:
                errors.append("subject names must be non-empty strings")
            # bool is an int subclass, reject it explicitly
            if isinstance(score, bool) or not isinstance(score, int):
                errors.append(f"score for {subject} must be an integer")

    name = record.get("name")
    if name is not None and not isinstance(name, str):
        errors.append("name must be a string")
    elif name is not None and len(name) > MAX_NAME_LENGTH:
        errors.append(f"name must be at most {MAX_NAME_LENGTH} characters")

    if errors:
        raise ValidationError(errors)

    return {"id": student_id, "name": name, "subjects": dict(subjects)}


def _has_record_shape(data: Any) -> bool:
    return (
        isinstance(data, dict)
        and isinstance(data.get("id"), str)
        and isinstance(data.get("subjects"), dict)
    )


class ResultService:
    """
    Result lookup with a read-through cache.

    Usage:
        from core.cache import cache
        from core.repositories import ResultRepository

        with db.session() as session:
            service = ResultService(ResultRepository(session), cache, ttl=600)
            record = service.get_result("S101")
    """

    def __init__(self, store: RecordStore, cache: LookupCache, ttl: int = CacheKeys.TTL_RESULT):
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        self.store = store
        self.cache = cache
        self.ttl = ttl

    def get_result(self, student_id: str) -> dict[str, Any]:
        """
        Resolve a student identifier to its result record.

        Raises:
            ValidationError: If student_id is empty
            NotFoundError: If the record store has no result for student_id
            StoreUnavailableError: If the record store fails
        """
        if not isinstance(student_id, str) or not student_id.strip():
            raise ValidationError(["id is required"])

        key = CacheKeys.result(student_id)
        cached = self._read_cache(key)
        if cached is not None:
            logger.debug("cache_hit", key=key)
            return cached

        logger.debug("cache_miss", key=key)
        record = self.store.find_by_identifier(student_id)
        if record is None:
            # Absence is not cached, the next lookup asks the store again
            logger.info("result_not_found", student_id=student_id)
            raise NotFoundError("result", student_id)

        self._write_cache(key, record)
        return record

    def put_result(self, record: Any) -> int:
        """
        Persist a new result record and warm the cache.

        Returns:
            The storage key assigned by the record store

        Raises:
            ValidationError: If the record is malformed (nothing is stored)
            DuplicateRecordError: If a result for the identifier already exists
            StoreUnavailableError: If the record store fails
        """
        canonical = validate_result_record(record)
        storage_key = self.store.insert(canonical)
        logger.info("result_stored", student_id=canonical["id"], storage_key=storage_key)
        self._write_cache(CacheKeys.result(canonical["id"]), canonical)
        return storage_key

    def _read_cache(self, key: str) -> dict[str, Any] | None:
        try:
            payload = self.cache.get(key)
        except CacheUnavailableError as e:
            logger.warning("cache_get_failed", key=key, error=str(e))
            return None
        if payload is None:
            return None
        try:
            data = json.loads(payload)
        except (UnicodeDecodeError, ValueError) as e:
            logger.warning("cache_payload_invalid", key=key, error=str(e))
            return None
        if not _has_record_shape(data):
            logger.warning("cache_payload_invalid", key=key, error="unexpected record shape")
            return None
        return data

    def _write_cache(self, key: str, record: dict[str, Any]) -> None:
        try:
            payload = json.dumps(record).encode("utf-8")
            if not self.cache.set_with_expiry(key, payload, self.ttl):
                logger.warning("cache_set_rejected", key=key)
        except (CacheUnavailableError, TypeError) as e:
            logger.warning("cache_set_failed", key=key, error=str(e))
