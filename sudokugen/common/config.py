# -*- coding: utf-8 -*-
"""Configs for puzzle generation."""
from dataclasses import dataclass, field
from typing import Optional

from omegaconf import OmegaConf

from sudokugen.common.constants import (
    DEFAULT_CLUES,
    MAX_SOLVE_ITERATIONS,
    SEED_CELLS,
)


@dataclass
class GeneratorConfig:
    """Config for `PuzzleGenerator`."""

    clues: int = DEFAULT_CLUES
    # one of `easy`, `normal`, `hard`, `extreme`; overrides `clues` when set
    difficulty: Optional[str] = None
    seed_cells: int = SEED_CELLS
    max_solve_iterations: int = MAX_SOLVE_ITERATIONS
    # None retries until a seed is solvable
    max_attempts: Optional[int] = None
    seed: Optional[int] = None
    solver: str = "backtracking"

@dataclass
class LogConfig:
    level: str = "INFO"


@dataclass
class Config:
    """Global configuration."""

    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    log: LogConfig = field(default_factory=LogConfig)

    def check_and_update(self) -> "Config":
        """Validate the config in place and fill derived fields."""
        from sudokugen.common.config_validator import validate_config

        validate_config(self)
        return self

    def to_yaml(self) -> str:
        return OmegaConf.to_yaml(OmegaConf.structured(self))


def load_config(config_path: str) -> Config:
    """Load a YAML config and merge it over the defaults.

    Args:
        config_path (str): Path to the YAML file.

    Returns:
        Config: The merged config, not yet validated.
    """
    schema = OmegaConf.structured(Config)
    yaml_config = OmegaConf.load(config_path)
    try:
        config = OmegaConf.merge(schema, yaml_config)
        return OmegaConf.to_object(config)
    except Exception as e:
        raise ValueError(f"Invalid configuration {config_path}: {e}") from e
