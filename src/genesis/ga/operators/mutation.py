"""
Mutation operators.

The engine decides whether a child is mutated; an operator only decides how.
The concrete classes below work on gene-vector solutions.
"""

from abc import ABC, abstractmethod

import numpy as np

from src.genesis.core.exceptions import ConfigurationError
from src.genesis.core.problem import Solution


class MutationOperator(ABC):
    """Abstract base class for in-place mutation of one individual."""

    @abstractmethod
    def mutate(self, rng: np.random.Generator, solution: Solution) -> None:
        """Perturb ``solution`` in place."""


def _check_probability(name: str, value: float) -> float:
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be within [0, 1], got {value}")
    return value


class BitFlipMutation(MutationOperator):
    """Flip each binary gene independently with ``probability``."""

    def __init__(self, probability: float = 0.05):
        self.probability = _check_probability("probability", probability)

    def mutate(self, rng: np.random.Generator, solution: Solution) -> None:
        genes = solution.genes
        mask = rng.random(len(genes)) < self.probability
        for i in np.flatnonzero(mask):
            genes[i] = type(genes[i])(not genes[i])


class SwapMutation(MutationOperator):
    """Exchange two distinct positions. Genomes shorter than two genes are left alone."""

    def mutate(self, rng: np.random.Generator, solution: Solution) -> None:
        genes = solution.genes
        if len(genes) < 2:
            return
        i, j = (int(k) for k in rng.choice(len(genes), size=2, replace=False))
        genes[i], genes[j] = genes[j], genes[i]


class GaussianMutation(MutationOperator):
    """Add N(0, sigma) noise to each numeric gene with ``probability``."""

    def __init__(self, sigma: float = 0.1, probability: float = 1.0):
        if sigma <= 0:
            raise ConfigurationError(f"sigma must be positive, got {sigma}")
        self.sigma = sigma
        self.probability = _check_probability("probability", probability)

    def mutate(self, rng: np.random.Generator, solution: Solution) -> None:
        genes = solution.genes
        mask = rng.random(len(genes)) < self.probability
        noise = rng.normal(0.0, self.sigma, len(genes))
        for i in np.flatnonzero(mask):
            genes[i] = genes[i] + float(noise[i])
