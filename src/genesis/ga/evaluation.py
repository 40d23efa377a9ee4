"""
Fitness evaluation for whole populations.

Sequential and parallel modes write the same fitness values into the same
positions; only wall-clock time differs. Parallel mode hands each worker a
disjoint, contiguous slice of the population.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import List, Optional, Sequence

import logfire

from src.genesis.core.problem import Problem, Solution


def _evaluate_chunk(problem: Problem, chunk: Sequence[Solution]) -> int:
    """Evaluate a chunk of individuals in order (for parallel processing)."""
    for solution in chunk:
        problem.evaluate(solution)
    return len(chunk)


def evaluate_sequential(problem: Problem, population: Sequence[Solution]) -> None:
    """Evaluate individuals one after another in population order."""
    for solution in population:
        problem.evaluate(solution)


def evaluate_parallel(
    problem: Problem,
    population: Sequence[Solution],
    num_workers: Optional[int] = None,
    chunk_size: int = 10
) -> None:
    """
    Evaluate individuals concurrently on a thread pool.

    ``problem.evaluate`` must depend only on the solution it is given and on
    read-only problem state. The first exception raised by a worker is
    re-raised here once all submitted chunks have finished.
    """
    chunks: List[Sequence[Solution]] = [
        population[i:i + chunk_size] for i in range(0, len(population), chunk_size)
    ]
    if not chunks:
        return

    with ThreadPoolExecutor(max_workers=num_workers) as executor:
        futures = [executor.submit(_evaluate_chunk, problem, chunk) for chunk in chunks]
        for future in as_completed(futures):
            future.result()


def evaluate_population(
    problem: Problem,
    population: Sequence[Solution],
    parallel: bool = False,
    num_workers: Optional[int] = None,
    chunk_size: int = 10
) -> int:
    """Evaluate every individual in place and return how many were evaluated."""
    with logfire.span("Evaluate Population", size=len(population), parallel=parallel):
        if parallel:
            evaluate_parallel(problem, population, num_workers, chunk_size)
        else:
            evaluate_sequential(problem, population)
    return len(population)
