"""
Genesis - Source Package

This package contains the metaheuristic optimization engine and the
application-level configuration and observability helpers.
"""

__version__ = "1.0.0"

# Package-level imports for convenience
from src.core.config import settings

__all__ = [
    "settings",
    "__version__",
]
