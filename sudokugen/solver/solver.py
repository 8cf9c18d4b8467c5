# -*- coding: utf-8 -*-
"""Base solver class."""
from abc import ABC, abstractmethod

from sudokugen.common.constants import MAX_SOLVE_ITERATIONS
from sudokugen.grid.grid_state import GridState
from sudokugen.utils.registry import Registry

SOLVERS = Registry(
    "solvers",
    default_mapping={
        "backtracking": "sudokugen.solver.backtracking.BacktrackingSolver",
    },
)


class Solver(ABC):
    """Completes a grid in place or raises `ExhaustedError`."""

    def __init__(self, max_iterations: int = MAX_SOLVE_ITERATIONS):
        self.max_iterations = max_iterations
        self.last_steps = 0

    @abstractmethod
    def solve(self, grid: GridState) -> bool:
        """Fill every empty cell of `grid`.

        Returns:
            bool: Always True; failures raise `ExhaustedError`.
        """


def build_solver(name: str, max_iterations: int = MAX_SOLVE_ITERATIONS) -> Solver:
    """Instantiate the solver registered as `name`."""
    solver_cls = SOLVERS.get(name)
    if solver_cls is None:
        raise ValueError(f"Unknown solver `{name}`, available: {SOLVERS.list()}")
    return solver_cls(max_iterations=max_iterations)
