"""
Problem and solution contracts for the Genesis optimization engine.

A problem fixes the optimization direction and knows how to score a
solution. A solution is any cloneable value carrying a scalar fitness.
"""

from abc import ABC, abstractmethod
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Iterable, MutableSequence, Optional, TypeVar


class OptimizationGoal(Enum):
    """Direction in which fitness values improve."""
    MINIMIZE = "minimize"
    MAXIMIZE = "maximize"

    def is_better(self, new_fitness: float, current_fitness: float) -> bool:
        """Return True if ``new_fitness`` strictly improves on ``current_fitness``."""
        if self is OptimizationGoal.MINIMIZE:
            return new_fitness < current_fitness
        return new_fitness > current_fitness

    def select_best(self, solutions: Iterable["S"]) -> Optional["S"]:
        """
        Return the best solution of an evaluated collection.

        The walk only replaces the running best on a strict improvement,
        so the earliest optimal element wins ties. Returns None for an
        empty collection.
        """
        best = None
        for solution in solutions:
            if best is None or self.is_better(solution.fitness, best.fitness):
                best = solution
        return best


class Solution(ABC):
    """
    Abstract base class for candidate solutions.

    Fitness is None until the owning problem evaluates the solution.
    """

    @property
    @abstractmethod
    def fitness(self) -> Optional[float]:
        """Current fitness score."""

    @abstractmethod
    def set_fitness(self, fitness: float) -> None:
        """Store a fitness score computed by a problem."""

    def clone(self) -> "Solution":
        """Create a deep copy of this solution."""
        return deepcopy(self)


S = TypeVar("S", bound=Solution)


@dataclass(eq=False)
class VectorSolution(Solution):
    """
    Solution backed by an ordered, indexable sequence of genes.

    ``genes`` may be a list or a one-dimensional numpy array; operators
    mutate it in place. Solutions compare by identity.
    """

    genes: MutableSequence[Any] = field(default_factory=list)
    _fitness: Optional[float] = field(default=None, repr=False)

    @property
    def fitness(self) -> Optional[float]:
        return self._fitness

    def set_fitness(self, fitness: float) -> None:
        self._fitness = float(fitness)

    def __len__(self) -> int:
        return len(self.genes)

    def __repr__(self) -> str:
        return f"VectorSolution(genes={list(self.genes)!r}, fitness={self._fitness})"


class Problem(ABC):
    """
    Abstract base class for optimization problems.

    Concrete subclasses must set ``goal`` and implement ``evaluate``. Problems
    are read-only during a run, so ``evaluate`` may be called concurrently
    from worker threads.
    """

    goal: ClassVar[OptimizationGoal]

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if getattr(cls.evaluate, "__isabstractmethod__", False):
            return
        if not isinstance(getattr(cls, "goal", None), OptimizationGoal):
            raise TypeError(
                f"{cls.__name__} must declare its goal as an OptimizationGoal"
            )

    @abstractmethod
    def evaluate(self, solution: Solution) -> None:
        """Compute the fitness of ``solution`` and store it via ``set_fitness``."""
