# -*- coding: utf-8 -*-
"""Bounded backtracking search."""
from sudokugen.common.constants import CELL_COUNT, EMPTY, GRID_SIZE, MAX_VALUE, MIN_VALUE
from sudokugen.common.exceptions import ExhaustedError
from sudokugen.grid.grid_state import GridState
from sudokugen.solver.budget import SolveBudget
from sudokugen.solver.solver import SOLVERS, Solver
from sudokugen.utils.log import get_logger

logger = get_logger(__name__)


@SOLVERS.register_module("backtracking")
class BacktrackingSolver(Solver):
    """Depth-first search over empty cells in row-major order.

    Values 1..9 are tried in ascending order and the first completion wins.
    Each search step consumes one unit of a budget created per `solve` call;
    running out raises `ExhaustedError` and unwinds the whole search.
    """

    def solve(self, grid: GridState) -> bool:
        budget = SolveBudget(self.max_iterations)
        try:
            solved = self._search(grid, 0, budget)
        except ExhaustedError:
            logger.debug(f"Solve aborted after {budget.used} steps.")
            raise
        finally:
            self.last_steps = budget.used
        if not solved:
            raise ExhaustedError(
                f"Sudoku unsolvable, search space exhausted after {budget.used} steps",
                steps=budget.used,
            )
        return True

    def _search(self, grid: GridState, index: int, budget: SolveBudget) -> bool:
        budget.consume()
        if index == CELL_COUNT:
            return True

        x, y = index % GRID_SIZE, index // GRID_SIZE
        if grid.get(x, y) != EMPTY:
            return self._search(grid, index + 1, budget)

        for value in range(MIN_VALUE, MAX_VALUE + 1):
            if grid.set(value, x, y) and self._search(grid, index + 1, budget):
                return True
        grid.set(EMPTY, x, y)
        return False
