# -*- coding: utf-8 -*-
"""Errors raised by sudokugen."""


class SudokuError(Exception):
    """Base class of sudokugen errors."""


class InvalidClueCount(SudokuError, ValueError):
    """The requested number of clues is outside the solvable range."""

    def __init__(self, clues: int, message: str):
        super().__init__(message)
        self.clues = clues


class ExhaustedError(SudokuError, RuntimeError):
    """The solver ran out of budget, or search space, before completing the grid."""

    def __init__(self, message: str, steps: int = 0):
        super().__init__(message)
        self.steps = steps
