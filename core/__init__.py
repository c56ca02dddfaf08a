"""
Core Layer - Configuration, logging and dependency injection.
"""

from .config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
