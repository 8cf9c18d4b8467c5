"""Shared fixtures for the unit tests."""
from typing import List

from sudokugen.common.config import Config

SOLVED_GRID: List[int] = [
    int(c)
    for c in (
        "534678912"
        "672195348"
        "198342567"
        "859761423"
        "426853791"
        "713924856"
        "961537284"
        "287419635"
        "345286179"
    )
]


def index(x: int, y: int) -> int:
    return y * 9 + x


def with_empty_cells(*positions) -> List[int]:
    """A copy of `SOLVED_GRID` with the given (x, y) cells cleared."""
    cells = list(SOLVED_GRID)
    for x, y in positions:
        cells[index(x, y)] = 0
    return cells


def get_template_config(**generator_kwargs) -> Config:
    config = Config()
    for key, value in generator_kwargs.items():
        setattr(config.generator, key, value)
    return config


def count_filled(cells) -> int:
    return sum(1 for value in cells if value != 0)
