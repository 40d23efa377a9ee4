"""
Core functionality for Genesis.

This package contains application settings and observability setup
shared by entry points and tests.
"""

from src.core.config import settings, Settings
from src.core.observability import configure_observability

__all__ = [
    "settings",
    "Settings",
    "configure_observability",
]
