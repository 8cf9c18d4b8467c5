from sudokugen.generator.puzzle_generator import PuzzleGenerator, make_rng
from sudokugen.generator.retry import RetryPolicy

__all__ = [
    "PuzzleGenerator",
    "RetryPolicy",
    "make_rng",
]
