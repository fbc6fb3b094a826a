"""
Collaborator interfaces used by the services.

Synopsis:
    The services only depend on these protocols, so the SQLAlchemy
    repositories and the Redis client can be swapped for in-memory fakes.
"""

from typing import Any, Protocol


class RecordStore(Protocol):
    """Authoritative keyed collection of records."""

    def find_by_identifier(self, student_id: str) -> dict[str, Any] | None:
        """Return the record for an identifier, or None if absent."""

    def insert(self, record: dict[str, Any]) -> int:
        """Persist a new record and return its storage key."""

    def count_all(self) -> int:
        """Return the number of stored records."""


class LookupCache(Protocol):
    """Time-expiring key/value layer in front of a RecordStore.

    Implementations raise CacheUnavailableError when the backend cannot be
    reached; expired entries must read back as None.
    """

    def get(self, key: str) -> bytes | None:
        """Return the stored payload, or None if absent or expired."""

    def set_with_expiry(self, key: str, value: bytes, ttl_seconds: int) -> bool:
        """Store a payload that expires after ttl_seconds."""


__all__ = ["RecordStore", "LookupCache"]
