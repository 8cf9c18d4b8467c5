# -*- coding: utf-8 -*-
"""Test cases for row, column and box constraints."""
import unittest

from sudokugen.grid.validator import (
    CONSTRAINTS,
    ConstraintValidator,
    is_safe,
    is_valid_box,
    is_valid_column,
    is_valid_row,
)
from tests.tools import SOLVED_GRID, index, with_empty_cells


class TestConstraints(unittest.TestCase):
    def setUp(self):
        self.cells = [0] * 81

    def test_empty_grid_accepts_everything(self):
        for value in range(1, 10):
            with self.subTest(value=value):
                self.assertTrue(is_safe(value, 4, 4, self.cells))

    def test_row_conflict(self):
        self.cells[index(8, 0)] = 5
        self.assertFalse(is_valid_row(5, 0, 0, self.cells))
        self.assertTrue(is_valid_column(5, 0, 0, self.cells))
        self.assertTrue(is_valid_box(5, 0, 0, self.cells))
        self.assertFalse(is_safe(5, 0, 0, self.cells))

    def test_column_conflict(self):
        self.cells[index(0, 8)] = 5
        self.assertTrue(is_valid_row(5, 0, 0, self.cells))
        self.assertFalse(is_valid_column(5, 0, 0, self.cells))
        self.assertFalse(is_safe(5, 0, 0, self.cells))

    def test_box_conflict(self):
        # (2, 2) shares the top-left box with (0, 0) but neither row nor column
        self.cells[index(2, 2)] = 5
        self.assertTrue(is_valid_row(5, 0, 0, self.cells))
        self.assertTrue(is_valid_column(5, 0, 0, self.cells))
        self.assertFalse(is_valid_box(5, 0, 0, self.cells))
        self.assertFalse(is_safe(5, 0, 0, self.cells))

    def test_box_origin(self):
        self.cells[index(3, 3)] = 7
        self.assertFalse(is_safe(7, 5, 5, self.cells))
        self.assertTrue(is_safe(7, 6, 6, self.cells))
        self.assertTrue(is_safe(7, 2, 2, self.cells))

    def test_own_cell_is_ignored(self):
        # every value of a solved grid is safe where it already is
        for i, value in enumerate(SOLVED_GRID):
            x, y = i % 9, i // 9
            self.assertTrue(is_safe(value, x, y, SOLVED_GRID))

    def test_only_missing_value_is_safe(self):
        cells = with_empty_cells((4, 4))
        safe = [v for v in range(1, 10) if is_safe(v, 4, 4, cells)]
        self.assertEqual(safe, [5])

    def test_custom_rules(self):
        self.cells[index(8, 0)] = 5
        validator = ConstraintValidator(rules=["column", "box"])
        self.assertTrue(validator.is_safe(5, 0, 0, self.cells))
        self.assertTrue(validator(5, 0, 0, self.cells))
        self.assertEqual(ConstraintValidator().rule_names, ("row", "column", "box"))

    def test_unknown_rule(self):
        with self.assertRaises(ValueError):
            ConstraintValidator(rules=["diagonal"])

    def test_registry(self):
        self.assertEqual(CONSTRAINTS.list(), ["box", "column", "row"])
        self.assertIs(CONSTRAINTS.get("row"), is_valid_row)
        self.assertIsNone(CONSTRAINTS.get("non_existent_rule"))
