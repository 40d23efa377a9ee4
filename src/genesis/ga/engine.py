"""
Genetic Algorithm Engine for Genesis.

This module implements the generational genetic algorithm: tournament-style
parent selection, probabilistic crossover and mutation, optional repair, and
full replacement of the population every generation. Elitism is not applied;
the solver keeps the global best.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

import logfire
import numpy as np

from src.genesis.core.config import GeneticAlgorithmConfig
from src.genesis.core.exceptions import ConfigurationError, EmptyPopulationError
from src.genesis.core.problem import OptimizationGoal, Problem, Solution
from src.genesis.core.solver import Metaheuristic, setup_logger
from src.genesis.core.state import AlgorithmState
from src.genesis.ga.evaluation import evaluate_population
from src.genesis.ga.initializer import HybridInitializer
from src.genesis.ga.operators.crossover import CrossoverOperator
from src.genesis.ga.operators.mutation import MutationOperator
from src.genesis.ga.operators.repair import RepairOperator
from src.genesis.ga.operators.selection import SelectionOperator, TournamentSelection


class GeneticAlgorithm(Metaheuristic):
    """
    Generational genetic algorithm.

    Each step builds ``population_size // 2`` pairs of children, so an odd
    population size loses its last slot from the first generation on.
    """

    def __init__(
        self,
        population_size: int,
        crossover_rate: float,
        mutation_rate: float,
        initializer: HybridInitializer,
        selection: SelectionOperator,
        crossover: CrossoverOperator,
        mutation: MutationOperator,
        repair: Optional[RepairOperator] = None,
        enable_parallel: bool = False,
        num_workers: Optional[int] = None,
        chunk_size: int = 10,
        random_seed: Optional[int] = None,
        log_interval: int = 10,
        metrics_export: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the genetic algorithm engine.

        Args:
            population_size: Number of individuals per generation
            crossover_rate: Probability of recombining a pair of parents
            mutation_rate: Probability of mutating each child
            initializer: Seeds the first population
            selection: Picks parent pairs
            crossover: Recombines parents
            mutation: Perturbs children
            repair: Optional post-mutation repair applied to every child
            enable_parallel: Evaluate fitness on a thread pool
            num_workers: Thread pool size (None for auto)
            chunk_size: Individuals per parallel chunk
            random_seed: Seed for reproducible runs (None for OS entropy)
            log_interval: Generations between progress logs
            metrics_export: Send generation metrics to Logfire
            logger: Optional logger instance
        """
        if population_size < 0:
            raise ConfigurationError(f"population_size must be non-negative, got {population_size}")
        for name, rate in (("crossover_rate", crossover_rate), ("mutation_rate", mutation_rate)):
            if not 0.0 <= rate <= 1.0:
                raise ConfigurationError(f"{name} must be within [0, 1], got {rate}")

        self.population_size = population_size
        self.crossover_rate = crossover_rate
        self.mutation_rate = mutation_rate
        self.initializer = initializer
        self.selection = selection
        self.crossover = crossover
        self.mutation = mutation
        self.repair = repair
        self.enable_parallel = enable_parallel
        self.num_workers = num_workers
        self.chunk_size = chunk_size
        self.log_interval = log_interval
        self.metrics_export = metrics_export
        self.logger = logger or setup_logger("genesis.engine")

        # Every initialize/step draws from its own spawned child stream
        self._seed_sequence = np.random.SeedSequence(random_seed)

        # State tracking
        self._population: List[Solution] = []
        self.generation = 0
        self.last_repair_count = 0
        self.statistics: Dict[str, Any] = {}

    @property
    def population(self) -> List[Solution]:
        """Snapshot of the current population."""
        return list(self._population)

    def _spawn_rng(self) -> np.random.Generator:
        return np.random.default_rng(self._seed_sequence.spawn(1)[0])

    def _evaluate(self, problem: Problem, population: Sequence[Solution]) -> int:
        return evaluate_population(
            problem,
            population,
            parallel=self.enable_parallel,
            num_workers=self.num_workers,
            chunk_size=self.chunk_size
        )

    def initialize(self, problem: Problem) -> AlgorithmState:
        """Seed and evaluate the first population."""
        with logfire.span("Initialize Population", population_size=self.population_size):
            population = self.initializer.initialize_population(problem, self.population_size)
            if not population:
                raise EmptyPopulationError(
                    "Initial population cannot be empty.",
                    details={"population_size": self.population_size}
                )

            evaluations = self._evaluate(problem, population)
            best_initial = problem.goal.select_best(population).clone()

            self._population = population
            self.generation = 0
            self.last_repair_count = 0
            self._record_statistics(problem, population)

            self.logger.info(
                f"Initialized population with {len(population)} individuals, "
                f"best fitness {best_initial.fitness}"
            )

            return AlgorithmState(
                best_solution=best_initial,
                evaluations_count=evaluations
            )

    def step(self, problem: Problem, state: AlgorithmState) -> Optional[Solution]:
        """Breed, evaluate and install the next generation; return its best child."""
        goal = problem.goal
        rng = self._spawn_rng()
        old_population = self._population
        new_population: List[Solution] = []
        repaired = 0

        with logfire.span("Generation", generation=self.generation + 1):
            for _ in range(self.population_size // 2):
                parent1, parent2 = self.selection.select(rng, old_population, goal)

                if rng.random() < self.crossover_rate:
                    child1, child2 = self.crossover.crossover(rng, parent1, parent2)
                else:
                    child1, child2 = parent1.clone(), parent2.clone()

                if rng.random() < self.mutation_rate:
                    self.mutation.mutate(rng, child1)
                if rng.random() < self.mutation_rate:
                    self.mutation.mutate(rng, child2)

                if self.repair is not None:
                    repaired += self.repair.repair(child1)
                    repaired += self.repair.repair(child2)

                new_population.append(child1)
                new_population.append(child2)

            state.evaluations_count += self._evaluate(problem, new_population)
            generation_best = goal.select_best(new_population)

            self._population = new_population
            self.generation += 1
            self.last_repair_count = repaired
            self._record_statistics(problem, new_population)

            if self.generation % self.log_interval == 0:
                self._log_progress()

        return generation_best.clone() if generation_best is not None else None

    def _record_statistics(self, problem: Problem, population: Sequence[Solution]) -> Dict[str, Any]:
        """Calculate fitness statistics for the current generation."""
        if not population:
            self.statistics = {"generation": self.generation, "population_size": 0}
            return self.statistics

        fitnesses = np.array([s.fitness for s in population], dtype=float)
        if problem.goal is OptimizationGoal.MINIMIZE:
            best, worst = fitnesses.min(), fitnesses.max()
        else:
            best, worst = fitnesses.max(), fitnesses.min()

        self.statistics = {
            "generation": self.generation,
            "population_size": len(population),
            "best_fitness": float(best),
            "worst_fitness": float(worst),
            "avg_fitness": float(fitnesses.mean()),
            "fitness_std": float(fitnesses.std()),
            "repaired": self.last_repair_count
        }
        return self.statistics

    def _log_progress(self) -> None:
        """Log evolution progress."""
        stats = self.statistics

        self.logger.info(
            f"Generation {self.generation}: "
            f"Best: {stats.get('best_fitness', 0):.4f}, "
            f"Avg: {stats.get('avg_fitness', 0):.4f}, "
            f"Std: {stats.get('fitness_std', 0):.4f}, "
            f"Repaired: {stats.get('repaired', 0)}"
        )

        if self.metrics_export:
            logfire.info("Evolution Progress", **stats)


def create_genetic_algorithm(
    config: GeneticAlgorithmConfig,
    initializer: HybridInitializer,
    crossover: CrossoverOperator,
    mutation: MutationOperator,
    repair: Optional[RepairOperator] = None,
    selection: Optional[SelectionOperator] = None,
    logger: Optional[logging.Logger] = None
) -> GeneticAlgorithm:
    """Build a ``GeneticAlgorithm`` from a validated configuration."""
    config.validate_consistency()
    evolution = config.evolution

    return GeneticAlgorithm(
        population_size=evolution.population_size,
        crossover_rate=evolution.crossover_rate,
        mutation_rate=evolution.mutation_rate,
        initializer=initializer,
        selection=selection or TournamentSelection(evolution.tournament_size),
        crossover=crossover,
        mutation=mutation,
        repair=repair,
        enable_parallel=config.parallelization.enable_parallel,
        num_workers=config.parallelization.num_workers,
        chunk_size=config.parallelization.chunk_size,
        random_seed=config.random_seed,
        log_interval=config.logging.log_interval,
        metrics_export=config.logging.metrics_export,
        logger=logger or setup_logger("genesis.engine", config.logging.log_level)
    )
