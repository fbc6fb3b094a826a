"""
FastAPI dependency injection module.

Provides centralized dependencies for:
- Repositories
- Services
- Caching
"""

import threading

from fastapi import Depends
from sqlalchemy.orm import Session

from core.cache import RedisCache, cache
from core.config import Settings, get_settings
from core.repositories import ResultRepository, StudentRepository
from core.services import ResultService

from ..database import get_db

_cache_init_lock = threading.Lock()

# =============================================================================
# Repository Dependencies
# =============================================================================


def get_result_repository(db: Session = Depends(get_db)) -> ResultRepository:
    """Get ResultRepository instance."""
    return ResultRepository(db)


def get_student_repository(db: Session = Depends(get_db)) -> StudentRepository:
    """Get StudentRepository instance."""
    return StudentRepository(db)


# =============================================================================
# Cache Dependencies
# =============================================================================


def get_cache() -> RedisCache:
    """Get the process-wide Redis cache, initializing it at most once."""
    if not cache.is_initialized:
        with _cache_init_lock:
            if not cache.is_initialized:
                cache.initialize()
    return cache


# =============================================================================
# Service Dependencies
# =============================================================================


def get_result_service(
    result_repo: ResultRepository = Depends(get_result_repository),
    lookup_cache: RedisCache = Depends(get_cache),
    settings: Settings = Depends(get_settings),
) -> ResultService:
    """Get ResultService wired to the request's repository and the shared cache."""
    return ResultService(result_repo, lookup_cache, ttl=settings.cache_ttl)


__all__ = [
    "get_result_repository",
    "get_student_repository",
    "get_cache",
    "get_result_service",
]
