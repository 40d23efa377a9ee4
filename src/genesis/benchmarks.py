"""
Reference problems and seeding heuristics.

OneMax maximizes the number of ones in a fixed-length bit string. It is small
enough for tests and demos and exercises every engine component.
"""

from typing import Optional

import numpy as np

from src.genesis.core.problem import OptimizationGoal, Problem, VectorSolution
from src.genesis.ga.initializer import InitialSolutionHeuristic


class OneMaxProblem(Problem):
    """Fitness is the count of ones in the genome."""

    goal = OptimizationGoal.MAXIMIZE

    def __init__(self, length: int):
        self.length = length

    def evaluate(self, solution: VectorSolution) -> None:
        solution.set_fitness(sum(int(g) for g in solution.genes))


class RandomBitStringHeuristic(InitialSolutionHeuristic):
    """Uniformly random bit strings, one fresh string per call."""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def generate(self, problem: OneMaxProblem) -> VectorSolution:
        bits = self.rng.integers(0, 2, size=problem.length)
        return VectorSolution(genes=[int(b) for b in bits])


class ConstantBitStringHeuristic(InitialSolutionHeuristic):
    """Always returns the same bit string filled with ``bit``."""

    deterministic = True

    def __init__(self, bit: int = 0):
        self.bit = bit

    def generate(self, problem: OneMaxProblem) -> VectorSolution:
        return VectorSolution(genes=[self.bit] * problem.length)
