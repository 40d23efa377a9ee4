"""
Generic solver driver for Genesis metaheuristics.

The solver asks a metaheuristic to initialize once, then steps it until the
termination criterion fires, keeping the best solution seen so far.
"""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

import logfire

from src.genesis.core.problem import Problem, Solution
from src.genesis.core.state import AlgorithmState
from src.genesis.core.termination import TerminationCriteria

S = TypeVar("S", bound=Solution)


class Metaheuristic(ABC, Generic[S]):
    """
    Abstract base class for search strategies driven by a ``Solver``.

    ``step`` may update ``state.evaluations_count``; ``iteration_count`` and
    ``best_solution`` belong to the solver.
    """

    @abstractmethod
    def initialize(self, problem: Problem) -> AlgorithmState[S]:
        """Build the initial state, evaluating the starting solutions."""

    @abstractmethod
    def step(self, problem: Problem, state: AlgorithmState[S]) -> Optional[S]:
        """Advance the search by one generation and return its best solution, if any."""


def setup_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Create a stream logger for an engine component.

    Without ``log_level`` the logger inherits its level from the ``genesis``
    parent logger.
    """
    logger = logging.getLogger(name)
    if log_level is not None:
        logger.setLevel(getattr(logging, log_level))

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


class Solver(Generic[S]):
    """Runs a metaheuristic on a problem until a termination criterion is met."""

    def __init__(
        self,
        problem: Problem,
        metaheuristic: Metaheuristic[S],
        termination: TerminationCriteria,
        logger: Optional[logging.Logger] = None
    ):
        self.problem = problem
        self.metaheuristic = metaheuristic
        self.termination = termination
        self.logger = logger or setup_logger("genesis.solver")

    def run(self) -> S:
        """
        Execute the optimization and return the best solution found.

        The returned solution is never worse, under the problem's goal, than
        the best solution produced by ``initialize``. If the criterion already
        holds after initialization, that initial best is returned unchanged.
        """
        goal = self.problem.goal

        with logfire.span("Solver run",
                          problem=type(self.problem).__name__,
                          metaheuristic=type(self.metaheuristic).__name__,
                          goal=goal.value):
            state = self.metaheuristic.initialize(self.problem)
            self.logger.info(
                f"Initialized {type(self.metaheuristic).__name__}, "
                f"initial best fitness {state.best_solution.fitness}"
            )

            while not self.termination.should_terminate(state):
                step_best = self.metaheuristic.step(self.problem, state)
                if step_best is not None and goal.is_better(
                    step_best.fitness, state.best_solution.fitness
                ):
                    state.best_solution = step_best
                    self.logger.debug(
                        f"Iteration {state.iteration_count}: "
                        f"new best fitness {step_best.fitness}"
                    )
                state.iteration_count += 1

            self.logger.info(
                f"Run finished after {state.iteration_count} iterations, "
                f"{state.evaluations_count} evaluations in {state.elapsed}; "
                f"best fitness {state.best_solution.fitness}"
            )
            logfire.info("Solver finished",
                         iterations=state.iteration_count,
                         evaluations=state.evaluations_count,
                         best_fitness=state.best_solution.fitness)

            return state.best_solution
