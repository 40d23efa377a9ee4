"""
Repair operators applied to every child after mutation.

The boolean returned by ``repair`` reports whether the solution was changed;
it is informational and does not alter the generational loop.
"""

from abc import ABC, abstractmethod
from typing import Callable

from src.genesis.core.problem import Solution


class RepairOperator(ABC):
    """Abstract base class for constraint repair."""

    @abstractmethod
    def repair(self, solution: Solution) -> bool:
        """Fix ``solution`` in place. Return True if it was modified."""


class NoOpRepair(RepairOperator):
    """Identity repair for problems without invalid states."""

    def repair(self, solution: Solution) -> bool:
        return False


class FunctionRepair(RepairOperator):
    """Adapt a plain ``(solution) -> bool`` callable to the repair interface."""

    def __init__(self, func: Callable[[Solution], bool]):
        self.func = func

    def repair(self, solution: Solution) -> bool:
        return bool(self.func(solution))

    def __repr__(self) -> str:
        return f"FunctionRepair({getattr(self.func, '__name__', repr(self.func))})"
