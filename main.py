"""
Genesis - Demo Entry Point

Runs the genetic algorithm on the OneMax benchmark with configuration read
from the environment (``GENESIS_*`` variables, optionally via a .env file).
"""

from dotenv import load_dotenv
import logfire

from src.core.config import Settings
from src.core.observability import configure_observability
from src.genesis import (
    GeneticAlgorithmConfig,
    HybridInitializer,
    OnePointCrossover,
    BitFlipMutation,
    Solver,
    create_genetic_algorithm
)
from src.genesis.benchmarks import (
    OneMaxProblem,
    RandomBitStringHeuristic,
    ConstantBitStringHeuristic
)

# Load environment variables
load_dotenv()

GENOME_LENGTH = 64


def main() -> None:
    settings = Settings()
    configure_observability(settings)

    config = GeneticAlgorithmConfig.from_env()
    problem = OneMaxProblem(GENOME_LENGTH)

    initializer = HybridInitializer([
        (RandomBitStringHeuristic(seed=config.random_seed), 0.9),
        (ConstantBitStringHeuristic(bit=0), 0.1),
    ])
    algorithm = create_genetic_algorithm(
        config,
        initializer=initializer,
        crossover=OnePointCrossover(),
        mutation=BitFlipMutation(probability=1.0 / GENOME_LENGTH)
    )

    solver = Solver(problem, algorithm, config.termination.build())
    best = solver.run()

    logfire.info("OneMax finished", best_fitness=best.fitness, length=GENOME_LENGTH)
    print(f"Best fitness: {best.fitness:.0f}/{GENOME_LENGTH}")
    print("Genes:", "".join(str(g) for g in best.genes))


if __name__ == "__main__":
    main()
