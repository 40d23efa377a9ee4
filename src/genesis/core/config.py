"""
Genesis Configuration Module.

This module defines configuration classes for the Genesis genetic algorithm,
including evolution parameters, termination budget, parallel evaluation and
logging settings.
"""

from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, Field, ConfigDict
from datetime import timedelta
import json
import os

from src.genesis.core.exceptions import ConfigurationError
from src.genesis.core.termination import (
    TerminationCriteria,
    ByIterations,
    ByDuration,
    AnyOf
)


class EvolutionParameters(BaseModel):
    """Parameters controlling the generational loop."""

    model_config = ConfigDict(validate_assignment=True)

    population_size: int = Field(
        default=100,
        ge=1,
        description="Number of individuals in the population"
    )
    crossover_rate: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Probability of crossover between two parents"
    )
    mutation_rate: float = Field(
        default=0.1,
        ge=0.0,
        le=1.0,
        description="Probability of mutating each child"
    )
    tournament_size: int = Field(
        default=3,
        ge=1,
        description="Number of individuals in each selection tournament"
    )


class TerminationConfig(BaseModel):
    """Stopping budget for a solver run."""

    max_iterations: Optional[int] = Field(
        default=100,
        ge=0,
        description="Maximum number of generations"
    )
    max_duration: Optional[timedelta] = Field(
        default=None,
        description="Maximum wall-clock runtime"
    )

    def build(self) -> TerminationCriteria:
        """Create the termination criterion described by this configuration."""
        criteria = []
        if self.max_iterations is not None:
            criteria.append(ByIterations(self.max_iterations))
        if self.max_duration is not None:
            criteria.append(ByDuration(self.max_duration))

        if not criteria:
            raise ConfigurationError(
                "A termination budget is required: set max_iterations or max_duration"
            )
        if len(criteria) == 1:
            return criteria[0]
        return AnyOf(*criteria)


class ParallelizationConfig(BaseModel):
    """Configuration for parallel fitness evaluation."""

    enable_parallel: bool = Field(
        default=False,
        description="Evaluate fitness on a thread pool"
    )
    num_workers: Optional[int] = Field(
        default=None,
        ge=1,
        description="Number of parallel workers (None for auto)"
    )
    chunk_size: int = Field(
        default=10,
        ge=1,
        description="Individuals per parallel chunk"
    )


class LoggingConfig(BaseModel):
    """Configuration for logging and monitoring."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO",
        description="Logging level"
    )
    log_interval: int = Field(
        default=10,
        ge=1,
        description="Generations between progress logs"
    )
    metrics_export: bool = Field(
        default=True,
        description="Export generation metrics to Logfire"
    )


class GeneticAlgorithmConfig(BaseModel):
    """Main configuration class for the Genesis genetic algorithm."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra='forbid'
    )

    evolution: EvolutionParameters = Field(
        default_factory=EvolutionParameters,
        description="Evolution parameters"
    )
    termination: TerminationConfig = Field(
        default_factory=TerminationConfig,
        description="Termination budget"
    )
    parallelization: ParallelizationConfig = Field(
        default_factory=ParallelizationConfig,
        description="Parallel evaluation configuration"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig,
        description="Logging and monitoring configuration"
    )

    random_seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducibility"
    )

    @classmethod
    def from_env(cls) -> "GeneticAlgorithmConfig":
        """Create configuration from environment variables."""
        config_dict: Dict[str, Any] = {}

        if pop_size := os.getenv("GENESIS_POPULATION_SIZE"):
            config_dict.setdefault("evolution", {})["population_size"] = int(pop_size)
        if crossover_rate := os.getenv("GENESIS_CROSSOVER_RATE"):
            config_dict.setdefault("evolution", {})["crossover_rate"] = float(crossover_rate)
        if mutation_rate := os.getenv("GENESIS_MUTATION_RATE"):
            config_dict.setdefault("evolution", {})["mutation_rate"] = float(mutation_rate)
        if tournament_size := os.getenv("GENESIS_TOURNAMENT_SIZE"):
            config_dict.setdefault("evolution", {})["tournament_size"] = int(tournament_size)

        if max_iterations := os.getenv("GENESIS_MAX_ITERATIONS"):
            config_dict.setdefault("termination", {})["max_iterations"] = int(max_iterations)
        if max_seconds := os.getenv("GENESIS_MAX_SECONDS"):
            config_dict.setdefault("termination", {})["max_duration"] = timedelta(
                seconds=float(max_seconds)
            )

        if enable_parallel := os.getenv("GENESIS_ENABLE_PARALLEL"):
            config_dict.setdefault("parallelization", {})["enable_parallel"] = (
                enable_parallel.lower() in ("1", "true", "yes")
            )
        if num_workers := os.getenv("GENESIS_NUM_WORKERS"):
            config_dict.setdefault("parallelization", {})["num_workers"] = int(num_workers)

        if log_level := os.getenv("GENESIS_LOG_LEVEL"):
            config_dict.setdefault("logging", {})["log_level"] = log_level.upper()

        if random_seed := os.getenv("GENESIS_RANDOM_SEED"):
            config_dict["random_seed"] = int(random_seed)

        return cls(**config_dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()

    def save(self, filepath: str) -> None:
        """Save configuration to JSON file."""
        with open(filepath, 'w') as f:
            f.write(self.model_dump_json(indent=2))

    @classmethod
    def load(cls, filepath: str) -> "GeneticAlgorithmConfig":
        """Load configuration from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)
        return cls(**data)

    def validate_consistency(self) -> None:
        """Validate configuration consistency across components."""
        # Odd populations lose their last slot after the first generation
        population_size = self.evolution.population_size
        if population_size > 1:
            population_size -= population_size % 2

        if self.evolution.tournament_size > population_size:
            raise ConfigurationError(
                f"Tournament size ({self.evolution.tournament_size}) must not exceed "
                f"population size ({population_size})",
                details={
                    "tournament_size": self.evolution.tournament_size,
                    "population_size": self.evolution.population_size,
                    "bred_population_size": population_size
                }
            )

        if self.termination.max_iterations is None and self.termination.max_duration is None:
            raise ConfigurationError(
                "A termination budget is required: set max_iterations or max_duration"
            )


# Convenience functions
def create_default_config() -> GeneticAlgorithmConfig:
    """Create a default configuration suitable for most use cases."""
    return GeneticAlgorithmConfig()


def create_test_config() -> GeneticAlgorithmConfig:
    """Create a configuration suitable for testing (smaller, faster)."""
    return GeneticAlgorithmConfig(
        evolution=EvolutionParameters(
            population_size=20,
            crossover_rate=0.9,
            mutation_rate=0.2,
            tournament_size=3
        ),
        termination=TerminationConfig(max_iterations=10),
        logging=LoggingConfig(
            log_level="WARNING",
            log_interval=1
        ),
        parallelization=ParallelizationConfig(
            enable_parallel=False  # Disable for deterministic tests
        ),
        random_seed=42
    )
