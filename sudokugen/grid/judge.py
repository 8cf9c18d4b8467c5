from typing import Iterator, List, Sequence

from sudokugen.common.constants import BOX_SIZE, EMPTY, GRID_SIZE


def _units(cells: Sequence[int]) -> Iterator[List[int]]:
    # rows
    for y in range(GRID_SIZE):
        yield [cells[y * GRID_SIZE + x] for x in range(GRID_SIZE)]
    # columns
    for x in range(GRID_SIZE):
        yield [cells[y * GRID_SIZE + x] for y in range(GRID_SIZE)]
    # 3x3 boxes
    for by in range(0, GRID_SIZE, BOX_SIZE):
        for bx in range(0, GRID_SIZE, BOX_SIZE):
            yield [
                cells[y * GRID_SIZE + x]
                for y in range(by, by + BOX_SIZE)
                for x in range(bx, bx + BOX_SIZE)
            ]


class SudokuJudge:
    """
    Judge a flat 81-cell grid.
    - Checks row, column and 3x3 box validity
    - Checks completeness
    """

    @staticmethod
    def is_valid(cells: Sequence[int]) -> bool:
        for unit in _units(cells):
            nums = [v for v in unit if v != EMPTY]
            if len(nums) != len(set(nums)):
                return False
        return True

    @staticmethod
    def is_complete(cells: Sequence[int]) -> bool:
        return EMPTY not in cells and SudokuJudge.is_valid(cells)

    @staticmethod
    def is_solved(cells: Sequence[int], solution: Sequence[int]) -> bool:
        return list(cells) == list(solution)
