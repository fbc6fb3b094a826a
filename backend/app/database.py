"""
Database session access for the backend.

Re-exports from the unified core.db module. Database initialization is
handled explicitly in main.py startup, not at import time.
"""

from core.db import db, get_db

__all__ = ["db", "get_db"]
