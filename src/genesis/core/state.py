"""Mutable search state shared between a solver and its metaheuristic."""

import time
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Generic, TypeVar

from src.genesis.core.problem import Solution

S = TypeVar("S", bound=Solution)


@dataclass
class AlgorithmState(Generic[S]):
    """
    Bookkeeping for a single solver run.

    ``iteration_count`` is advanced by the solver, ``evaluations_count`` by
    the metaheuristic. ``start_time`` is a ``time.perf_counter`` reading.
    """

    best_solution: S
    iteration_count: int = 0
    evaluations_count: int = 0
    start_time: float = field(default_factory=time.perf_counter)

    @property
    def elapsed(self) -> timedelta:
        """Wall-clock time since the run started."""
        return timedelta(seconds=time.perf_counter() - self.start_time)
