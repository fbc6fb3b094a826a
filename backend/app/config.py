"""
Application configuration using Pydantic settings.

Re-exports from the unified core.config module.
"""

from core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
