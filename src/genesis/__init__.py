"""
Genesis - population-based metaheuristic optimization.

A pluggable engine for the genetic-algorithm family: callers define a problem
and a solution encoding, pick operators, and run a solver under an iteration
or time budget.
"""

from src.genesis.core.config import (
    GeneticAlgorithmConfig,
    EvolutionParameters,
    TerminationConfig,
    ParallelizationConfig,
    LoggingConfig,
    create_default_config,
    create_test_config
)
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
from src.genesis.ga.initializer import InitialSolutionHeuristic, HybridInitializer
from src.genesis.ga.evaluation import evaluate_population
from src.genesis.ga.engine import GeneticAlgorithm, create_genetic_algorithm
from src.genesis.ga.operators import (
    SelectionOperator,
    TournamentSelection,
    CrossoverOperator,
    OnePointCrossover,
    TwoPointCrossover,
    MutationOperator,
    BitFlipMutation,
    SwapMutation,
    GaussianMutation,
    RepairOperator,
    NoOpRepair,
    FunctionRepair
)

__version__ = "1.0.0"

__all__ = [
    # Configuration
    "GeneticAlgorithmConfig",
    "EvolutionParameters",
    "TerminationConfig",
    "ParallelizationConfig",
    "LoggingConfig",
    "create_default_config",
    "create_test_config",
    # Errors
    "GenesisError",
    "ConfigurationError",
    "EmptyPopulationError",
    # Contracts
    "OptimizationGoal",
    "Problem",
    "Solution",
    "VectorSolution",
    "AlgorithmState",
    # Termination
    "TerminationCriteria",
    "ByIterations",
    "ByDuration",
    "AnyOf",
    "AllOf",
    # Driver
    "Metaheuristic",
    "Solver",
    # Genetic algorithm
    "InitialSolutionHeuristic",
    "HybridInitializer",
    "evaluate_population",
    "GeneticAlgorithm",
    "create_genetic_algorithm",
    # Operators
    "SelectionOperator",
    "TournamentSelection",
    "CrossoverOperator",
    "OnePointCrossover",
    "TwoPointCrossover",
    "MutationOperator",
    "BitFlipMutation",
    "SwapMutation",
    "GaussianMutation",
    "RepairOperator",
    "NoOpRepair",
    "FunctionRepair",
]
