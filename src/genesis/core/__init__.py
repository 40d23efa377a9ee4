"""
Core abstractions for Genesis.

Problem and solution contracts, search state, termination criteria, the
generic solver driver, configuration and the exception hierarchy.
"""

from src.genesis.core.exceptions import GenesisError, ConfigurationError, EmptyPopulationError
from src.genesis.core.problem import OptimizationGoal, Problem, Solution, VectorSolution
from src.genesis.core.state import AlgorithmState
from src.genesis.core.termination import (
    TerminationCriteria,
    ByIterations,
    ByDuration,
    AnyOf,
    AllOf
)
from src.genesis.core.solver import Metaheuristic, Solver

__all__ = [
    "GenesisError",
    "ConfigurationError",
    "EmptyPopulationError",
    "OptimizationGoal",
    "Problem",
    "Solution",
    "VectorSolution",
    "AlgorithmState",
    "TerminationCriteria",
    "ByIterations",
    "ByDuration",
    "AnyOf",
    "AllOf",
    "Metaheuristic",
    "Solver",
]
