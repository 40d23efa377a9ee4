"""
Stop conditions for solver runs.

A criterion is a pure predicate over the current ``AlgorithmState``; it is
checked between generations only.
"""

from abc import ABC, abstractmethod
from datetime import timedelta
from typing import Union

from src.genesis.core.exceptions import ConfigurationError
from src.genesis.core.state import AlgorithmState


class TerminationCriteria(ABC):
    """Abstract base class for termination criteria."""

    @abstractmethod
    def should_terminate(self, state: AlgorithmState) -> bool:
        """Return True when the run should stop."""

    def __or__(self, other: "TerminationCriteria") -> "AnyOf":
        return AnyOf(self, other)

    def __and__(self, other: "TerminationCriteria") -> "AllOf":
        return AllOf(self, other)


class ByIterations(TerminationCriteria):
    """Stop once a fixed number of generations has completed."""

    def __init__(self, max_iterations: int):
        if max_iterations < 0:
            raise ConfigurationError(
                f"max_iterations must be non-negative, got {max_iterations}"
            )
        self.max_iterations = max_iterations

    def should_terminate(self, state: AlgorithmState) -> bool:
        return state.iteration_count >= self.max_iterations

    def __repr__(self) -> str:
        return f"ByIterations(max_iterations={self.max_iterations})"


class ByDuration(TerminationCriteria):
    """Stop once the wall-clock budget is spent. Accepts a timedelta or seconds."""

    def __init__(self, time_limit: Union[timedelta, float]):
        if not isinstance(time_limit, timedelta):
            time_limit = timedelta(seconds=time_limit)
        if time_limit < timedelta(0):
            raise ConfigurationError(f"time_limit must be non-negative, got {time_limit}")
        self.time_limit = time_limit

    def should_terminate(self, state: AlgorithmState) -> bool:
        return state.elapsed >= self.time_limit

    def __repr__(self) -> str:
        return f"ByDuration(time_limit={self.time_limit})"


class AnyOf(TerminationCriteria):
    """Stop when any wrapped criterion fires."""

    def __init__(self, *criteria: TerminationCriteria):
        if not criteria:
            raise ConfigurationError("AnyOf requires at least one criterion")
        self.criteria = criteria

    def should_terminate(self, state: AlgorithmState) -> bool:
        return any(c.should_terminate(state) for c in self.criteria)

    def __repr__(self) -> str:
        return f"AnyOf({', '.join(repr(c) for c in self.criteria)})"


class AllOf(TerminationCriteria):
    """Stop only when every wrapped criterion fires."""

    def __init__(self, *criteria: TerminationCriteria):
        if not criteria:
            raise ConfigurationError("AllOf requires at least one criterion")
        self.criteria = criteria

    def should_terminate(self, state: AlgorithmState) -> bool:
        return all(c.should_terminate(state) for c in self.criteria)

    def __repr__(self) -> str:
        return f"AllOf({', '.join(repr(c) for c in self.criteria)})"
