"""Genetic algorithm engine, population seeding and fitness evaluation."""

from src.genesis.ga.initializer import InitialSolutionHeuristic, HybridInitializer
from src.genesis.ga.evaluation import evaluate_population
from src.genesis.ga.engine import GeneticAlgorithm, create_genetic_algorithm

__all__ = [
    "InitialSolutionHeuristic",
    "HybridInitializer",
    "evaluate_population",
    "GeneticAlgorithm",
    "create_genetic_algorithm",
]
