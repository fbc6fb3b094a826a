"""
Result Checker Core Library.

This package provides the core functionality for the Result Checker,
including database management, models, repositories, the cached lookup
service, and logging.

Usage:
    # Database
    from core.db import db, get_db
    from core.models import Result, Student
    from core.repositories import ResultRepository, StudentRepository

    # Cached lookup
    from core.cache import cache
    from core.services import ResultService

    # Config
    from core.config import get_settings, Settings

    # Logging
    from core.logging import get_logger, configure_logging
"""

__version__ = "1.0.0"

# Lazy imports to avoid circular dependencies
# Users should import directly from submodules:
#   from core.db import db
#   from core.config import get_settings
#   from core.logging import get_logger
