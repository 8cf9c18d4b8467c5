"""Step budget of a single solve."""
from sudokugen.common.exceptions import ExhaustedError


class SolveBudget:
    """Counts search steps for one top-level solve.

    A step is allowed while the remaining count is non-negative, so a budget of
    `limit` permits `limit + 1` steps before `consume` raises.
    """

    def __init__(self, limit: int):
        self.limit = limit
        self.remaining = limit

    @property
    def used(self) -> int:
        return self.limit - self.remaining

    def consume(self) -> None:
        if self.remaining < 0:
            raise ExhaustedError(
                f"Sudoku unsolvable within {self.limit} iterations", steps=self.used
            )
        self.remaining -= 1
