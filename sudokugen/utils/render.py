"""Human-readable grid printing."""
from typing import Sequence

from sudokugen.common.constants import BOX_SIZE, EMPTY, GRID_SIZE

BOX_SEPARATOR = "------+-------+------"


def render_grid(cells: Sequence[int], blank: str = ".") -> str:
    """Render 81 cells as nine lines, boxes separated by `|` and dashes."""
    lines = []
    for y in range(GRID_SIZE):
        row = []
        for x in range(GRID_SIZE):
            value = cells[y * GRID_SIZE + x]
            row.append(blank if value == EMPTY else str(value))
            if x % BOX_SIZE == BOX_SIZE - 1 and x != GRID_SIZE - 1:
                row.append("|")
        lines.append(" ".join(row))
        if y % BOX_SIZE == BOX_SIZE - 1 and y != GRID_SIZE - 1:
            lines.append(BOX_SEPARATOR)
    return "\n".join(lines)
