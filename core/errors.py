"""
Error taxonomy shared by the services, repositories and the HTTP layer.

- ValidationError: malformed input, raised before any store or cache call.
- NotFoundError: the record store has no entry for the identifier.
- DuplicateRecordError: a record with the same identifier already exists.
- StoreUnavailableError: the record store failed; surfaced to the caller.
- CacheUnavailableError: the lookup cache failed; absorbed by the services.
"""


class ResultCheckerError(Exception):
    """Base class for application errors."""


class ValidationError(ResultCheckerError):
    """Raised when a record is missing required fields or has bad values."""

    def __init__(self, errors: list[str]):
        self.errors = errors
        super().__init__("; ".join(errors))


class NotFoundError(ResultCheckerError):
    """Raised when no record exists for an identifier."""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} not found: {identifier}")


class DuplicateRecordError(ResultCheckerError):
    """Raised when inserting a record whose identifier is already stored."""

    def __init__(self, kind: str, identifier: str):
        self.kind = kind
        self.identifier = identifier
        super().__init__(f"{kind} already exists: {identifier}")


class StoreUnavailableError(ResultCheckerError):
    """Raised when the record store connection or operation fails."""


class CacheUnavailableError(ResultCheckerError):
    """Raised by the lookup cache client when Redis cannot be reached."""


__all__ = [
    "ResultCheckerError",
    "ValidationError",
    "NotFoundError",
    "DuplicateRecordError",
    "StoreUnavailableError",
    "CacheUnavailableError",
]
