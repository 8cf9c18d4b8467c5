# -*- coding: utf-8 -*-
"""Row, column and box constraints of a 9x9 grid."""
from typing import Callable, Optional, Sequence

from sudokugen.common.constants import BOX_SIZE, EMPTY, GRID_SIZE
from sudokugen.utils.registry import Registry

ConstraintFn = Callable[[int, int, int, Sequence[int]], bool]

CONSTRAINTS = Registry("constraints")

DEFAULT_RULES = ("row", "column", "box")


def _conflicts(value: int, current: int) -> bool:
    return current != EMPTY and current == value


@CONSTRAINTS.register_module("row")
def is_valid_row(value: int, x: int, y: int, cells: Sequence[int]) -> bool:
    """`value` does not appear elsewhere in row `y`."""
    for col in range(GRID_SIZE):
        if col == x:
            continue
        if _conflicts(value, cells[y * GRID_SIZE + col]):
            return False
    return True


@CONSTRAINTS.register_module("column")
def is_valid_column(value: int, x: int, y: int, cells: Sequence[int]) -> bool:
    """`value` does not appear elsewhere in column `x`."""
    for row in range(GRID_SIZE):
        if row == y:
            continue
        if _conflicts(value, cells[row * GRID_SIZE + x]):
            return False
    return True


@CONSTRAINTS.register_module("box")
def is_valid_box(value: int, x: int, y: int, cells: Sequence[int]) -> bool:
    """`value` does not appear elsewhere in the 3x3 box containing (x, y)."""
    box_x, box_y = (x // BOX_SIZE) * BOX_SIZE, (y // BOX_SIZE) * BOX_SIZE
    for row in range(box_y, box_y + BOX_SIZE):
        for col in range(box_x, box_x + BOX_SIZE):
            if col == x and row == y:
                continue
            if _conflicts(value, cells[row * GRID_SIZE + col]):
                return False
    return True


class ConstraintValidator:
    """Checks a candidate placement against a list of registered rules.

    Rules are applied in the given order and all of them must pass.

    Args:
        rules (Optional[Sequence[str]]): Names of rules in `CONSTRAINTS`.
            Defaults to row, column, box.
    """

    def __init__(self, rules: Optional[Sequence[str]] = None):
        self.rule_names = tuple(rules or DEFAULT_RULES)
        self.rules = []
        for name in self.rule_names:
            rule = CONSTRAINTS.get(name)
            if rule is None:
                raise ValueError(f"Unknown constraint `{name}`, available: {CONSTRAINTS.list()}")
            self.rules.append(rule)

    def is_safe(self, value: int, x: int, y: int, cells: Sequence[int]) -> bool:
        """True iff `value` can be placed at (x, y) without breaking any rule."""
        return all(rule(value, x, y, cells) for rule in self.rules)

    __call__ = is_safe


_default_validator = ConstraintValidator()


def is_safe(value: int, x: int, y: int, cells: Sequence[int]) -> bool:
    """Check `value` at (x, y) against the row, column and box rules."""
    return _default_validator.is_safe(value, x, y, cells)
