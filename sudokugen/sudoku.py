# -*- coding: utf-8 -*-
"""The playable puzzle."""
import copy
import numbers
from typing import List, Optional, Sequence, Tuple

from sudokugen.common.config import Config
from sudokugen.common.config_validator import check_clue_count
from sudokugen.common.constants import CELL_COUNT, DEFAULT_CLUES, Difficulty
from sudokugen.generator.puzzle_generator import PuzzleGenerator, RandomSource
from sudokugen.grid.grid_state import GridState
from sudokugen.solver import build_solver
from sudokugen.utils.render import render_grid


class Sudoku:
    """A 9x9 puzzle with a fixed set of clues.

    Constructing a `Sudoku` generates a fresh puzzle. Positions are (x, y),
    (0, 0) being the upper left corner and (8, 8) the lower right one.

    Usual clue counts:
        easy => 42, normal => 31, hard => 26, extreme => 20

    Args:
        clues: Number of cells shown, in [17, 81]. Anything that is not a
            number falls back to 31.
        rng: A numpy Generator or an int seed. Defaults to `config.generator.seed`.
        config (Optional[Config]): Generation settings.

    Raises:
        InvalidClueCount: If `clues` is below 17 or above 81.
    """

    def __init__(
        self,
        clues=DEFAULT_CLUES,
        rng: RandomSource = None,
        config: Optional[Config] = None,
    ):
        self.config = copy.deepcopy(config) if config is not None else Config()
        if isinstance(clues, bool) or not isinstance(clues, numbers.Real):
            clues = DEFAULT_CLUES
        # fractional counts are range-checked as given, then truncated
        check_clue_count(clues)
        self.config.generator.clues = int(clues)
        self.config.generator.difficulty = None
        self.config.check_and_update()

        self.generator = PuzzleGenerator(self.config.generator, rng=rng)
        self.grid = self.generator.generate(self.config.generator.clues)
        self.target_clues = self.config.generator.clues

    @classmethod
    def from_difficulty(
        cls, difficulty: str, rng: RandomSource = None, config: Optional[Config] = None
    ) -> "Sudoku":
        """Generate a puzzle with the clue count of a preset (`easy`, `normal`, ...)."""
        return cls(Difficulty(difficulty).clues, rng=rng, config=config)

    @classmethod
    def from_grid(cls, cells: Sequence[int], config: Optional[Config] = None) -> "Sudoku":
        """Wrap an existing grid; its nonzero cells become clues."""
        grid = GridState.from_cells(cells)
        grid.freeze()
        sudoku = cls.__new__(cls)
        sudoku._init_from_grid(grid, config)
        return sudoku

    def _init_from_grid(self, grid: GridState, config: Optional[Config]) -> None:
        self.config = copy.deepcopy(config) if config is not None else Config()
        self.grid = grid
        self.target_clues = grid.clue_count

    @property
    def clue_count(self) -> int:
        return self.grid.clue_count

    @property
    def original_grid(self) -> Tuple[int, ...]:
        return self.grid.original

    def is_resolved(self) -> bool:
        """True if every cell holds a number."""
        return self.grid.clue_count == CELL_COUNT

    def get_current_grid(self) -> List[int]:
        return self.grid.cells

    def get_number(self, x: int, y: int) -> int:
        """Value at (x, y), 0 if the cell is empty."""
        return self.grid.get(x, y)

    def set_number(self, value: int, x: int, y: int) -> bool:
        """Try to set `value` at (x, y); 0 clears the cell.

        Returns:
            bool: False if (x, y) is a clue or `value` breaks a row, column or
            box rule, True once the cell is updated.
        """
        return self.grid.set(value, x, y)

    def resolve(self) -> None:
        """Complete the current grid with a bounded backtracking search.

        Raises:
            ExhaustedError: If no completion is found within the iteration budget.
            ValueError: If the configured solver is not registered.
        """
        generator_config = self.config.generator
        solver = build_solver(generator_config.solver, generator_config.max_solve_iterations)
        solver.solve(self.grid)

    def __str__(self) -> str:
        return render_grid(self.grid.cells)
