# -*- coding: utf-8 -*-
"""Sudoku puzzle generation and bounded backtracking solving."""
from sudokugen.common.exceptions import ExhaustedError, InvalidClueCount, SudokuError
from sudokugen.sudoku import Sudoku

__version__ = "0.1.0"

__all__ = [
    "Sudoku",
    "SudokuError",
    "InvalidClueCount",
    "ExhaustedError",
]
