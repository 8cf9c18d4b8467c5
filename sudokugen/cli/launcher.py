"""Command line entry point: print a freshly generated puzzle."""
import argparse
import sys
from typing import List, Optional

from sudokugen.common.config import Config, load_config
from sudokugen.common.constants import Difficulty
from sudokugen.common.exceptions import ExhaustedError, InvalidClueCount
from sudokugen.grid.judge import SudokuJudge
from sudokugen.sudoku import Sudoku
from sudokugen.utils.log import get_logger, set_log_level
from sudokugen.utils.render import render_grid

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a 9x9 sudoku puzzle")
    parser.add_argument(
        "--config",
        type=str,
        default="",
        required=False,
        help="Path to a YAML configuration file",
    )
    parser.add_argument(
        "--clues",
        type=int,
        default=None,
        help="Number of cells shown, from 17 to 81 (default: 31)",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        default=None,
        choices=[d.name.lower() for d in Difficulty],
        help="Clue count preset, ignored when --clues is given",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--show-solution",
        action="store_true",
        default=False,
        help="Also print the grid completed by the solver",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Logging level")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> Config:
    config = load_config(args.config) if args.config else Config()
    if args.seed is not None:
        config.generator.seed = args.seed
    if args.clues is not None:
        config.generator.clues = args.clues
        config.generator.difficulty = None
    elif args.difficulty is not None:
        config.generator.difficulty = args.difficulty
    if args.log_level is not None:
        config.log.level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args).check_and_update()
        set_log_level(config.log.level)
        sudoku = Sudoku(config.generator.clues, config=config)
    except InvalidClueCount as e:
        logger.error(str(e))
        return 2
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        return 2
    except ExhaustedError as e:
        logger.error(f"Generation failed: {e}")
        return 1

    print(sudoku)
    if args.show_solution:
        solution = Sudoku.from_grid(sudoku.get_current_grid(), config=config)
        try:
            solution.resolve()
        except ExhaustedError as e:
            logger.warning(f"Could not solve the puzzle: {e}")
            return 1
        assert SudokuJudge.is_complete(solution.get_current_grid())
        print()
        print(render_grid(solution.get_current_grid()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
