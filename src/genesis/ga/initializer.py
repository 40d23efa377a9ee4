"""
Population seeding for the genetic algorithm.

A ``HybridInitializer`` mixes several construction heuristics by weight.
Weights are converted to counts by rounding ``pop_size * weight`` half away
from zero; overflow is
clipped at ``pop_size`` and any shortfall is filled from the first heuristic.
"""

import math
from abc import ABC, abstractmethod
from typing import List, Sequence, Tuple

import logfire

from src.genesis.core.exceptions import ConfigurationError
from src.genesis.core.problem import Problem, Solution


class InitialSolutionHeuristic(ABC):
    """Abstract base class for heuristics that build one starting solution."""

    #: A deterministic heuristic always returns the same solution, so the
    #: initializer calls it once and clones the result.
    deterministic: bool = False

    @abstractmethod
    def generate(self, problem: Problem) -> Solution:
        """Build a new, unevaluated solution for ``problem``."""

    def is_deterministic(self) -> bool:
        return self.deterministic


def proportional_count(pop_size: int, proportion: float) -> int:
    """Round ``pop_size * proportion`` half away from zero, clamped at 0."""
    return max(0, math.floor(pop_size * proportion + 0.5))


class HybridInitializer:
    """Builds a population from an ordered list of (heuristic, proportion) pairs."""

    def __init__(self, heuristics: Sequence[Tuple[InitialSolutionHeuristic, float]]):
        self.heuristics: List[Tuple[InitialSolutionHeuristic, float]] = list(heuristics)

    def initialize_population(self, problem: Problem, pop_size: int) -> List[Solution]:
        """
        Generate ``pop_size`` unevaluated solutions.

        Raises:
            ConfigurationError: if no heuristics are configured.
        """
        if not self.heuristics:
            raise ConfigurationError("No initialization heuristics were provided.")

        population: List[Solution] = []

        with logfire.span("Hybrid initialization", pop_size=pop_size,
                          heuristics=len(self.heuristics)):
            for heuristic, proportion in self.heuristics:
                count = proportional_count(pop_size, proportion)
                if count == 0:
                    continue

                if heuristic.is_deterministic():
                    base_solution = heuristic.generate(problem)
                    for _ in range(count):
                        if len(population) < pop_size:
                            population.append(base_solution.clone())
                else:
                    for _ in range(count):
                        if len(population) < pop_size:
                            population.append(heuristic.generate(problem))

            first_heuristic = self.heuristics[0][0]
            missing = pop_size - len(population)
            while len(population) < pop_size:
                population.append(first_heuristic.generate(problem))

            if missing > 0:
                logfire.debug("Topped up population from first heuristic",
                              missing=missing,
                              heuristic=type(first_heuristic).__name__)

        return population
