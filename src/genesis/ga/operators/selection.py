"""
Parent selection operators.

Implements tournament selection: each parent is the best of a small random
sample of the current population.
"""

from abc import ABC, abstractmethod
from typing import Sequence, Tuple

import numpy as np

from src.genesis.core.exceptions import ConfigurationError
from src.genesis.core.problem import OptimizationGoal, Solution


class SelectionOperator(ABC):
    """Abstract base class for parent selection."""

    @abstractmethod
    def select(
        self,
        rng: np.random.Generator,
        population: Sequence[Solution],
        goal: OptimizationGoal
    ) -> Tuple[Solution, Solution]:
        """Pick two parents from an evaluated population."""


class TournamentSelection(SelectionOperator):
    """
    Tournament selection without replacement inside each tournament.

    Two independent tournaments are run, so both parents may be the same
    individual.
    """

    def __init__(self, tournament_size: int):
        if tournament_size < 1:
            raise ConfigurationError(
                f"Tournament size must be greater than 0, got {tournament_size}",
                details={"tournament_size": tournament_size}
            )
        self.tournament_size = tournament_size

    def select(
        self,
        rng: np.random.Generator,
        population: Sequence[Solution],
        goal: OptimizationGoal
    ) -> Tuple[Solution, Solution]:
        if self.tournament_size > len(population):
            raise ConfigurationError(
                f"Tournament size ({self.tournament_size}) must not exceed "
                f"population size ({len(population)})",
                details={
                    "tournament_size": self.tournament_size,
                    "population_size": len(population)
                }
            )
        parent1 = self.run_tournament(rng, population, goal)
        parent2 = self.run_tournament(rng, population, goal)
        return parent1, parent2

    def run_tournament(
        self,
        rng: np.random.Generator,
        population: Sequence[Solution],
        goal: OptimizationGoal
    ) -> Solution:
        """Return the winner of one tournament; ties go to the earliest draw."""
        competitors = rng.choice(len(population), size=self.tournament_size, replace=False)
        return goal.select_best(population[int(i)] for i in competitors)

    def __repr__(self) -> str:
        return f"TournamentSelection(tournament_size={self.tournament_size})"
