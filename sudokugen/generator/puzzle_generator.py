# -*- coding: utf-8 -*-
"""Puzzle generation: random seed, bounded solve, hide cells."""
from typing import Optional, Union

import numpy as np

from sudokugen.common.config import GeneratorConfig
from sudokugen.common.config_validator import check_clue_count
from sudokugen.common.constants import CELL_COUNT, EMPTY, GRID_SIZE, MAX_VALUE, MIN_VALUE
from sudokugen.common.exceptions import ExhaustedError
from sudokugen.generator.retry import RetryPolicy
from sudokugen.grid.grid_state import GridState
from sudokugen.solver import Solver, build_solver
from sudokugen.utils.log import get_logger

RandomSource = Union[np.random.Generator, int, None]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Return `rng` itself if it is a numpy Generator, else seed a new one with it."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class PuzzleGenerator:
    """Generates a puzzle with a given number of clues.

    Each attempt seeds an empty grid with a few random values and lets the
    solver complete it. Attempts whose seed cannot be completed within the
    solver budget are discarded; the retry policy decides how many attempts
    are allowed. The completed grid is then thinned out to the requested
    number of clues and the remaining cells are frozen as clues.

    Args:
        config (Optional[GeneratorConfig]): Generation settings.
        rng (RandomSource): A numpy Generator, an int seed, or None. Defaults
            to `config.seed`.
        solver (Optional[Solver]): Defaults to the solver named by `config.solver`.
        retry_policy (Optional[RetryPolicy]): Defaults to `config.max_attempts`.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: RandomSource = None,
        solver: Optional[Solver] = None,
        retry_policy: Optional[RetryPolicy] = None,
    ):
        self.logger = get_logger(__name__)
        self.config = config or GeneratorConfig()
        self.rng = make_rng(rng if rng is not None else self.config.seed)
        if solver is None:
            solver = build_solver(self.config.solver, self.config.max_solve_iterations)
        self.solver = solver
        self.retry_policy = retry_policy or RetryPolicy(self.config.max_attempts)
        self.attempts = 0

    def _random_number(self, low: int, high: int) -> int:
        """Uniform integer in [low, high]."""
        return int(self.rng.integers(low, high, endpoint=True))

    def _random_cell(self):
        return self._random_number(0, GRID_SIZE - 1), self._random_number(0, GRID_SIZE - 1)

    def generate(self, clues: Optional[int] = None, grid: Optional[GridState] = None) -> GridState:
        """Generate a puzzle.

        Args:
            clues (Optional[int]): Number of cells left filled, in [17, 81].
                Defaults to `config.clues`.
            grid (Optional[GridState]): Grid to fill; a new one if omitted.

        Returns:
            GridState: A frozen grid with exactly `clues` nonzero cells.
        """
        if clues is None:
            clues = self.config.clues
        check_clue_count(clues)
        grid = grid or GridState()

        self._fill(grid)
        self._hide_numbers(grid, CELL_COUNT - clues)
        grid.freeze()
        self.logger.info(f"Generated a puzzle with {clues} clues after {self.attempts} attempt(s).")
        return grid

    def _fill(self, grid: GridState) -> None:
        """Seed and solve until an attempt succeeds."""
        last_error = None
        for attempt in self.retry_policy.attempts():
            self.attempts = attempt
            grid.reset()
            self._generate_seed(grid, self.config.seed_cells)
            try:
                self.solver.solve(grid)
                return
            except ExhaustedError as e:
                last_error = e
                self.logger.debug(f"Attempt {attempt} discarded: {e}")
        raise ExhaustedError(
            f"No solvable seed found in {self.retry_policy.max_attempts} attempts",
            steps=last_error.steps if last_error else 0,
        ) from last_error

    def _generate_seed(self, grid: GridState, count: int) -> None:
        """Fill `count` random cells with random values, without backtracking."""
        grid.set(self._random_number(MIN_VALUE, MAX_VALUE), 0, 0)
        remaining = count - 1
        while remaining > 0:
            x, y = self._random_cell()
            value = self._random_number(MIN_VALUE, MAX_VALUE)
            if grid.get(x, y) != EMPTY:
                continue
            if grid.set(value, x, y):
                remaining -= 1

    def _hide_numbers(self, grid: GridState, count: int) -> None:
        """Clear `count` random filled cells."""
        remaining = count
        while remaining > 0:
            x, y = self._random_cell()
            if grid.get(x, y) != EMPTY:
                grid.set(EMPTY, x, y)
                remaining -= 1
