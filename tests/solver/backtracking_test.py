# -*- coding: utf-8 -*-
"""Test cases for the bounded backtracking solver."""
import unittest

from sudokugen.common.exceptions import ExhaustedError
from sudokugen.grid.grid_state import GridState
from sudokugen.grid.judge import SudokuJudge
from sudokugen.solver import SOLVERS, SolveBudget, Solver, build_solver
from sudokugen.solver.backtracking import BacktrackingSolver
from tests.tools import SOLVED_GRID, index, with_empty_cells


class TestSolveBudget(unittest.TestCase):
    def test_limit_plus_one_steps(self):
        budget = SolveBudget(2)
        for _ in range(3):
            budget.consume()
        self.assertEqual(budget.used, 3)
        with self.assertRaises(ExhaustedError) as cm:
            budget.consume()
        self.assertEqual(cm.exception.steps, 3)


class TestBacktrackingSolver(unittest.TestCase):
    def test_registry(self):
        self.assertIs(SOLVERS.get("backtracking"), BacktrackingSolver)
        self.assertTrue(issubclass(BacktrackingSolver, Solver))
        self.assertIsNone(SOLVERS.get("non_existent_solver"))

    def test_build_solver(self):
        solver = build_solver("backtracking", max_iterations=50)
        self.assertIsInstance(solver, BacktrackingSolver)
        self.assertEqual(solver.max_iterations, 50)
        with self.assertRaises(ValueError):
            build_solver("non_existent_solver")

    def test_fills_single_empty_cell(self):
        grid = GridState.from_cells(with_empty_cells((4, 4)))
        self.assertTrue(BacktrackingSolver().solve(grid))
        self.assertEqual(grid.get(4, 4), SOLVED_GRID[index(4, 4)])
        self.assertEqual(grid.cells, SOLVED_GRID)
        self.assertEqual(grid.clue_count, 81)

    def test_fills_several_cells(self):
        grid = GridState.from_cells(with_empty_cells((0, 0), (3, 1), (8, 8), (5, 6)))
        BacktrackingSolver().solve(grid)
        self.assertTrue(SudokuJudge.is_complete(grid.cells))

    def test_full_grid_is_left_untouched(self):
        grid = GridState.from_cells(SOLVED_GRID)
        solver = BacktrackingSolver()
        solver.solve(grid)
        self.assertEqual(grid.cells, SOLVED_GRID)
        # one step per cell plus the terminal step
        self.assertEqual(solver.last_steps, 82)

    def test_budget_boundary(self):
        # one step per cell plus the terminal step: 82 steps, allowed by a budget of 81
        solver = BacktrackingSolver(max_iterations=81)
        grid = GridState.from_cells(with_empty_cells((4, 4)))
        solver.solve(grid)
        self.assertEqual(solver.last_steps, 82)

        solver = BacktrackingSolver(max_iterations=80)
        grid = GridState.from_cells(with_empty_cells((4, 4)))
        with self.assertRaises(ExhaustedError):
            solver.solve(grid)

    def test_budget_is_reset_per_solve(self):
        solver = BacktrackingSolver(max_iterations=81)
        for _ in range(3):
            grid = GridState.from_cells(with_empty_cells((4, 4)))
            solver.solve(grid)
            self.assertEqual(grid.cells, SOLVED_GRID)

    def test_unsolvable_grid(self):
        # (0, 0) sees 1..8 in its row and 9 in its column
        cells = [0] * 81
        for x in range(1, 9):
            cells[index(x, 0)] = x
        cells[index(0, 1)] = 9
        grid = GridState.from_cells(cells)
        with self.assertRaises(ExhaustedError):
            BacktrackingSolver().solve(grid)
        # failed placements are rolled back
        self.assertEqual(grid.cells, cells)

