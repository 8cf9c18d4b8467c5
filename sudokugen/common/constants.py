# -*- coding: utf-8 -*-
"""Constants."""
from enum import Enum

# grid geometry
GRID_SIZE = 9
BOX_SIZE = 3
CELL_COUNT = GRID_SIZE * GRID_SIZE
EMPTY = 0
MIN_VALUE = 1
MAX_VALUE = 9

# clue bounds
MIN_CLUES = 17
MAX_CLUES = CELL_COUNT
DEFAULT_CLUES = 31

# generation
SEED_CELLS = 8
MAX_SOLVE_ITERATIONS = 1000


class CaseInsensitiveEnum(Enum):
    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.name.lower() == value.lower():
                    return member
        return None


class Difficulty(CaseInsensitiveEnum):
    """Difficulty presets, valued by the number of clues left in the puzzle."""

    EASY = 42
    NORMAL = 31
    HARD = 26
    EXTREME = 20

    @property
    def clues(self) -> int:
        return self.value
