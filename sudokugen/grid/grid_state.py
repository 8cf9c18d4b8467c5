# -*- coding: utf-8 -*-
"""Grid storage with a frozen snapshot of the clue cells."""
from typing import List, Optional, Sequence, Tuple

from sudokugen.common.constants import CELL_COUNT, EMPTY, GRID_SIZE, MAX_VALUE
from sudokugen.grid.validator import ConstraintValidator


class GridState:
    """A 9x9 grid stored as 81 cells, index `y * 9 + x`.

    Until `freeze` is called no cell is a clue and every cell can be changed.
    After `freeze`, cells that were nonzero at that moment are clues and
    `set` refuses to change them.

    Attributes:
        clue_count (int): Number of nonzero cells.
    """

    def __init__(self, validator: Optional[ConstraintValidator] = None):
        self.validator = validator or ConstraintValidator()
        self._cells: List[int] = [EMPTY] * CELL_COUNT
        self._original: Optional[Tuple[int, ...]] = None
        self.clue_count = 0

    @classmethod
    def from_cells(
        cls, cells: Sequence[int], validator: Optional[ConstraintValidator] = None
    ) -> "GridState":
        """Build a grid from 81 values, copied as given."""
        if len(cells) != CELL_COUNT:
            raise ValueError(f"A grid needs {CELL_COUNT} cells, got {len(cells)}")
        grid = cls(validator=validator)
        for index, value in enumerate(cells):
            value = int(value)
            if not EMPTY <= value <= MAX_VALUE:
                raise ValueError(f"Cell {index} holds {value}, expected a value in [0, 9]")
            grid._cells[index] = value
        grid.clue_count = sum(1 for value in grid._cells if value != EMPTY)
        return grid

    @staticmethod
    def _index(x: int, y: int) -> int:
        if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            raise ValueError(f"Position ({x}, {y}) is outside the grid")
        return y * GRID_SIZE + x

    @property
    def cells(self) -> List[int]:
        return list(self._cells)

    @property
    def original(self) -> Optional[Tuple[int, ...]]:
        return self._original

    @property
    def frozen(self) -> bool:
        return self._original is not None

    def get(self, x: int, y: int) -> int:
        return self._cells[self._index(x, y)]

    def is_clue(self, x: int, y: int) -> bool:
        index = self._index(x, y)
        return self._original is not None and self._original[index] != EMPTY

    def set(self, value: int, x: int, y: int) -> bool:
        """Try to place `value` at (x, y); 0 clears the cell.

        Returns:
            bool: False, without mutation, if the cell is a clue or the value
            breaks a row, column or box rule. True otherwise.
        """
        index = self._index(x, y)
        if not EMPTY <= value <= MAX_VALUE:
            raise ValueError(f"Value {value} is not in [0, 9]")
        if self._original is not None and self._original[index] != EMPTY:
            return False

        current = self._cells[index]
        if value == EMPTY:
            self._cells[index] = EMPTY
            if current != EMPTY:
                self.clue_count -= 1
            return True

        if not self.validator.is_safe(value, x, y, self._cells):
            return False
        self._cells[index] = value
        if current == EMPTY:
            self.clue_count += 1
        return True

    def freeze(self) -> None:
        """Capture the current cells as the clue snapshot."""
        if self._original is not None:
            raise RuntimeError("The clue snapshot has already been taken")
        self._original = tuple(self._cells)

    def reset(self) -> None:
        self._cells = [EMPTY] * CELL_COUNT
        self._original = None
        self.clue_count = 0

    def empty_cells(self) -> List[Tuple[int, int]]:
        """(x, y) of every empty cell, in row-major order."""
        return [
            (index % GRID_SIZE, index // GRID_SIZE)
            for index, value in enumerate(self._cells)
            if value == EMPTY
        ]

    def __eq__(self, other) -> bool:
        if not isinstance(other, GridState):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"GridState(clue_count={self.clue_count}, frozen={self.frozen})"
