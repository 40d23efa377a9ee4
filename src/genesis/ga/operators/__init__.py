"""
Genetic operators for the Genesis engine.

One abstract base class per family (selection, crossover, mutation, repair)
plus the canonical implementations.
"""

from src.genesis.ga.operators.selection import SelectionOperator, TournamentSelection
from src.genesis.ga.operators.crossover import (
    CrossoverOperator,
    OnePointCrossover,
    TwoPointCrossover
)
from src.genesis.ga.operators.mutation import (
    MutationOperator,
    BitFlipMutation,
    SwapMutation,
    GaussianMutation
)
from src.genesis.ga.operators.repair import RepairOperator, NoOpRepair, FunctionRepair

__all__ = [
    # Selection
    "SelectionOperator",
    "TournamentSelection",
    # Crossover
    "CrossoverOperator",
    "OnePointCrossover",
    "TwoPointCrossover",
    # Mutation
    "MutationOperator",
    "BitFlipMutation",
    "SwapMutation",
    "GaussianMutation",
    # Repair
    "RepairOperator",
    "NoOpRepair",
    "FunctionRepair",
]
