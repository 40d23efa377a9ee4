"""
PyTest configuration and fixtures for Genesis.

This module provides shared test fixtures: small reference problems,
seeding heuristics, stub random generators and engine configurations.
"""

import os
import sys
from typing import List, Sequence

import numpy as np
import pytest
import logfire

# Add project root to Python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.genesis.core.problem import OptimizationGoal, Problem, VectorSolution
from src.genesis.ga.initializer import InitialSolutionHeuristic
from src.genesis.benchmarks import OneMaxProblem, RandomBitStringHeuristic
from src.genesis.core.config import create_test_config


# Keep spans local during tests
logfire.configure(send_to_logfire=False, console=False)


class SumProblem(Problem):
    """Minimize the sum of numeric genes."""

    goal = OptimizationGoal.MINIMIZE

    def evaluate(self, solution: VectorSolution) -> None:
        solution.set_fitness(float(sum(solution.genes)))


class CountingHeuristic(InitialSolutionHeuristic):
    """Returns ``[value] * length`` (stochastic) or a fixed list, counting calls."""

    def __init__(self, length: int = 4, value: int = 0, deterministic: bool = False):
        self.length = length
        self.value = value
        self.deterministic = deterministic
        self.calls = 0

    def generate(self, problem: Problem) -> VectorSolution:
        self.calls += 1
        if self.deterministic:
            return VectorSolution(genes=[self.value] * self.length)
        # Tag each stochastic individual with its call number
        return VectorSolution(genes=[self.value] * (self.length - 1) + [self.calls])


class StubGenerator:
    """Replays fixed draws in place of ``numpy.random.Generator``."""

    def __init__(self, integers: Sequence[int] = (), choices: Sequence[Sequence[int]] = ()):
        self._integers = list(integers)
        self._choices = [np.asarray(c) for c in choices]
        self.integer_calls: List[tuple] = []

    def integers(self, low, high=None, size=None):
        self.integer_calls.append((low, high))
        return self._integers.pop(0)

    def choice(self, a, size=None, replace=True):
        return self._choices.pop(0)


def make_population(fitnesses: Sequence[float]) -> List[VectorSolution]:
    """Build evaluated single-gene solutions with the given fitness values."""
    population = []
    for i, fitness in enumerate(fitnesses):
        solution = VectorSolution(genes=[i])
        solution.set_fitness(fitness)
        population.append(solution)
    return population


@pytest.fixture
def sum_problem():
    """Minimization problem over numeric genes."""
    return SumProblem()


@pytest.fixture
def onemax_problem():
    """OneMax with a 20-bit genome."""
    return OneMaxProblem(20)


@pytest.fixture
def random_bits():
    """Seeded random bit-string heuristic."""
    return RandomBitStringHeuristic(seed=7)


@pytest.fixture
def ga_test_config():
    """Genetic algorithm test configuration."""
    return create_test_config()


@pytest.fixture
def rng():
    """Seeded numpy generator."""
    return np.random.default_rng(12345)


# Test markers
pytest.mark.slow = pytest.mark.slow
pytest.mark.unit = pytest.mark.unit
