"""
Crossover operators for gene-vector solutions.

Both operators clone the parents and exchange one contiguous gene segment
between the clones. Genomes too short for the requested cut count, and draws
that collapse to an empty segment, return the unmodified clones.
"""

from abc import ABC, abstractmethod
from typing import MutableSequence, Tuple

import numpy as np

from src.genesis.core.problem import Solution


class CrossoverOperator(ABC):
    """Abstract base class for crossover."""

    @abstractmethod
    def crossover(
        self,
        rng: np.random.Generator,
        parent1: Solution,
        parent2: Solution
    ) -> Tuple[Solution, Solution]:
        """Produce two children from two parents. Parents are left untouched."""


def swap_segment(genes1: MutableSequence, genes2: MutableSequence, start: int, end: int) -> None:
    """Exchange ``genes[start:end]`` between two sequences in place."""
    segment = genes1[start:end].copy()
    genes1[start:end] = genes2[start:end]
    genes2[start:end] = segment


class OnePointCrossover(CrossoverOperator):
    """Swap the tails of the two genomes after a random cut in ``[1, len - 1]``."""

    def crossover(
        self,
        rng: np.random.Generator,
        parent1: Solution,
        parent2: Solution
    ) -> Tuple[Solution, Solution]:
        child1 = parent1.clone()
        child2 = parent2.clone()

        length = len(child1.genes)
        if length < 2:
            return child1, child2

        point = int(rng.integers(1, length))
        swap_segment(child1.genes, child2.genes, point, length)

        return child1, child2


class TwoPointCrossover(CrossoverOperator):
    """
    Swap the segment ``[p1, p2)`` between the two genomes.

    ``p1`` is drawn from ``[1, len - 2]`` and ``p2`` from ``[p1, len - 1]``;
    ``p1 == p2`` yields the unmodified clones.
    """

    def crossover(
        self,
        rng: np.random.Generator,
        parent1: Solution,
        parent2: Solution
    ) -> Tuple[Solution, Solution]:
        child1 = parent1.clone()
        child2 = parent2.clone()

        length = len(child1.genes)
        if length < 3:
            return child1, child2

        point1 = int(rng.integers(1, length - 1))
        point2 = int(rng.integers(point1, length))

        if point1 == point2:
            return child1, child2

        swap_segment(child1.genes, child2.genes, point1, point2)

        return child1, child2
