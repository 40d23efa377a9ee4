"""
Exception hierarchy for the Genesis optimization engine.

Configuration errors are programmer contract violations and abort a run.
Degenerate operator inputs are not errors and never raise.
"""

from typing import Any, Dict, Optional


class GenesisError(Exception):
    """Base exception for engine errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class ConfigurationError(GenesisError, ValueError):
    """Raised when the engine or one of its operators is misconfigured."""


class EmptyPopulationError(GenesisError, RuntimeError):
    """Raised when an initializer produces no individuals."""
