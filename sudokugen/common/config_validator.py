import logging
import math
from abc import ABC, abstractmethod
from typing import List

from sudokugen.common.config import Config
from sudokugen.common.constants import (
    MAX_CLUES,
    MIN_CLUES,
    Difficulty,
)
from sudokugen.common.exceptions import InvalidClueCount
from sudokugen.utils.log import get_logger


def check_clue_count(clues: int) -> None:
    """Raise `InvalidClueCount` unless `clues` is within [MIN_CLUES, MAX_CLUES]."""
    if not math.isfinite(clues):
        raise InvalidClueCount(clues, f"Invalid number of clues: {clues}")
    if clues < MIN_CLUES:
        raise InvalidClueCount(
            clues, f"It is not possible to resolve a sudoku with less than {MIN_CLUES} numbers"
        )
    if clues > MAX_CLUES:
        raise InvalidClueCount(clues, f"Sudoku must have a maximum of {MAX_CLUES} numbers")


class ConfigValidator(ABC):
    def __init__(self):
        self.logger = get_logger(__name__)

    @abstractmethod
    def validate(self, config: Config) -> None:
        pass


class GeneratorConfigValidator(ConfigValidator):
    def validate(self, config: Config) -> None:
        generator = config.generator

        # resolve difficulty preset
        if generator.difficulty is not None:
            try:
                difficulty = Difficulty(generator.difficulty)
            except ValueError:
                raise ValueError(
                    f"Invalid difficulty: {generator.difficulty}, "
                    f"expected one of {[d.name.lower() for d in Difficulty]}"
                )
            if generator.clues != difficulty.clues:
                self.logger.info(
                    f"`generator.difficulty` is `{difficulty.name.lower()}`, "
                    f"set `generator.clues` to {difficulty.clues}."
                )
            generator.clues = difficulty.clues

        check_clue_count(generator.clues)

        if not 1 <= generator.seed_cells <= MIN_CLUES:
            raise ValueError(
                f"`generator.seed_cells` should be in [1, {MIN_CLUES}], got {generator.seed_cells}"
            )
        if generator.max_solve_iterations <= 0:
            raise ValueError("`generator.max_solve_iterations` should be positive")
        if generator.max_attempts is not None and generator.max_attempts <= 0:
            raise ValueError("`generator.max_attempts` should be positive or null")

        from sudokugen.solver import SOLVERS

        if generator.solver not in SOLVERS:
            raise ValueError(f"Invalid solver: {generator.solver}, available: {SOLVERS.list()}")


class LogConfigValidator(ConfigValidator):
    def validate(self, config: Config) -> None:
        level = config.log.level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {config.log.level}")
        config.log.level = level


validators: List[ConfigValidator] = [
    LogConfigValidator(),
    GeneratorConfigValidator(),
]


def validate_config(config: Config) -> None:
    for validator in validators:
        validator.validate(config)
