"""
Unit tests for population fitness evaluation (Subtask 3.1).

Tests cover:
- Sequential and parallel modes produce identical, in-place results
- Evaluation counts
- Exception propagation from workers
"""

import threading

import pytest

from src.genesis import VectorSolution, evaluate_population
from src.genesis.ga.evaluation import evaluate_parallel
from conftest import SumProblem


class FailingProblem(SumProblem):
    def evaluate(self, solution):
        if solution.genes[0] == 13:
            raise ValueError("unlucky genome")
        super().evaluate(solution)


class ThreadRecordingProblem(SumProblem):
    def __init__(self):
        self.threads = set()
        self._lock = threading.Lock()

    def evaluate(self, solution):
        with self._lock:
            self.threads.add(threading.get_ident())
        super().evaluate(solution)


def build_population(size: int):
    return [VectorSolution(genes=[i, i * 2.0]) for i in range(size)]


class TestEvaluatePopulation:
    """Test suite for evaluate_population."""

    def test_sequential_sets_fitness_in_place(self):
        population = build_population(5)

        count = evaluate_population(SumProblem(), population)

        assert count == 5
        assert [s.fitness for s in population] == [0.0, 3.0, 6.0, 9.0, 12.0]

    def test_parallel_matches_sequential(self):
        """Switching modes changes neither values nor positions."""
        sequential = build_population(57)
        parallel = build_population(57)

        evaluate_population(SumProblem(), sequential)
        evaluate_population(SumProblem(), parallel, parallel=True, num_workers=4, chunk_size=5)

        assert [s.fitness for s in parallel] == [s.fitness for s in sequential]
        assert [s.genes for s in parallel] == [s.genes for s in sequential]

    def test_parallel_uses_worker_threads(self):
        problem = ThreadRecordingProblem()
        population = build_population(20)

        evaluate_parallel(problem, population, num_workers=2, chunk_size=5)

        assert threading.get_ident() not in problem.threads
        assert all(s.fitness is not None for s in population)

    def test_empty_population(self):
        assert evaluate_population(SumProblem(), []) == 0
        assert evaluate_population(SumProblem(), [], parallel=True) == 0

    @pytest.mark.parametrize("parallel", [False, True])
    def test_errors_propagate(self, parallel):
        """Exceptions from evaluate reach the caller in both modes."""
        population = build_population(20)

        with pytest.raises(ValueError, match="unlucky genome"):
            evaluate_population(FailingProblem(), population, parallel=parallel, chunk_size=3)
