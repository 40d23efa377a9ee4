"""
Unit tests for problem and solution contracts (Subtask 1.1).

Tests cover:
- Optimization goal comparisons
- First-on-tie best selection
- Vector solution cloning and fitness handling
- Algorithm state bookkeeping
"""

import time
from datetime import timedelta

import numpy as np
import pytest

from src.genesis import AlgorithmState, OptimizationGoal, Problem, VectorSolution
from conftest import SumProblem, make_population


class TestOptimizationGoal:
    """Test suite for optimization direction."""

    def test_minimize_prefers_smaller(self):
        """Lower fitness is better when minimizing."""
        assert OptimizationGoal.MINIMIZE.is_better(1.0, 2.0)
        assert not OptimizationGoal.MINIMIZE.is_better(2.0, 1.0)

    def test_maximize_prefers_larger(self):
        """Higher fitness is better when maximizing."""
        assert OptimizationGoal.MAXIMIZE.is_better(2.0, 1.0)
        assert not OptimizationGoal.MAXIMIZE.is_better(1.0, 2.0)

    def test_equal_values_are_not_better(self):
        """Comparisons are strict in both directions."""
        assert not OptimizationGoal.MINIMIZE.is_better(3.0, 3.0)
        assert not OptimizationGoal.MAXIMIZE.is_better(3.0, 3.0)

    def test_select_best_minimize(self):
        """The lowest fitness wins under minimization."""
        population = make_population([5, 1, 9, 3])
        assert OptimizationGoal.MINIMIZE.select_best(population) is population[1]

    def test_select_best_maximize(self):
        """The highest fitness wins under maximization."""
        population = make_population([5, 1, 9, 3])
        assert OptimizationGoal.MAXIMIZE.select_best(population) is population[2]

    def test_select_best_keeps_first_on_tie(self):
        """The earliest optimal element is kept when fitness values tie."""
        population = make_population([4, 2, 7, 2, 2])
        assert OptimizationGoal.MINIMIZE.select_best(population) is population[1]

        population = make_population([7, 7, 1])
        assert OptimizationGoal.MAXIMIZE.select_best(population) is population[0]

    def test_select_best_empty(self):
        """An empty collection has no best element."""
        assert OptimizationGoal.MINIMIZE.select_best([]) is None


class TestVectorSolution:
    """Test suite for the gene-vector solution."""

    def test_fitness_unset_until_evaluated(self):
        """Fitness starts as None and is set by the problem."""
        solution = VectorSolution(genes=[1.0, 2.0, 3.0])
        assert solution.fitness is None

        SumProblem().evaluate(solution)
        assert solution.fitness == 6.0

    def test_clone_is_independent(self):
        """Mutating a clone does not affect the original."""
        original = VectorSolution(genes=[0, 1, 0])
        original.set_fitness(1)

        clone = original.clone()
        clone.genes[0] = 1
        clone.set_fitness(2)

        assert original.genes == [0, 1, 0]
        assert original.fitness == 1
        assert clone.fitness == 2

    def test_clone_numpy_genes(self):
        """Numpy gene arrays are copied, not shared."""
        original = VectorSolution(genes=np.zeros(4))
        clone = original.clone()
        clone.genes[2] = 5.0

        assert original.genes[2] == 0.0
        assert len(clone) == 4

    def test_problem_is_abstract(self):
        """Problems must implement evaluate."""
        with pytest.raises(TypeError):
            Problem()

    def test_problem_requires_goal(self):
        """A concrete problem without an optimization direction is rejected."""
        with pytest.raises(TypeError, match="goal"):
            class Undirected(Problem):
                def evaluate(self, solution):
                    solution.set_fitness(0.0)

    def test_abstract_intermediate_may_defer_goal(self):
        class Base(Problem):
            pass

        class Concrete(Base):
            goal = OptimizationGoal.MAXIMIZE

            def evaluate(self, solution):
                solution.set_fitness(len(solution))

        assert Concrete.goal is OptimizationGoal.MAXIMIZE

    def test_solutions_compare_by_identity(self):
        """Equal numpy genomes neither raise nor make two solutions equal."""
        first = VectorSolution(genes=np.ones(3))
        second = VectorSolution(genes=np.ones(3))

        assert first != second
        assert first == first
        assert first in [first, second]
        assert second not in [first]


class TestAlgorithmState:
    """Test suite for search state."""

    def test_defaults(self):
        """Counters start at zero."""
        state = AlgorithmState(best_solution=VectorSolution(genes=[1]))
        assert state.iteration_count == 0
        assert state.evaluations_count == 0

    def test_elapsed_grows(self):
        """Elapsed time is measured from the start anchor."""
        state = AlgorithmState(
            best_solution=VectorSolution(genes=[1]),
            start_time=time.perf_counter() - 2.0
        )
        assert state.elapsed >= timedelta(seconds=2)
