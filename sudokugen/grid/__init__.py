from sudokugen.grid.grid_state import GridState
from sudokugen.grid.judge import SudokuJudge
from sudokugen.grid.validator import CONSTRAINTS, ConstraintValidator, is_safe

__all__ = [
    "GridState",
    "SudokuJudge",
    "CONSTRAINTS",
    "ConstraintValidator",
    "is_safe",
]
