# -*- coding: utf-8 -*-
"""Test cases for registry mapping."""
import unittest

from sudokugen.grid.validator import CONSTRAINTS
from sudokugen.solver import SOLVERS, Solver
from sudokugen.utils.registry import Registry


class TestRegistry(unittest.TestCase):
    """Test registry functionality."""

    def test_solver_registry_mapping(self):
        solver_names = list(SOLVERS._default_mapping.keys())
        for solver_name in solver_names:
            with self.subTest(solver_name=solver_name):
                solver_cls = SOLVERS.get(solver_name)
                self.assertIsNotNone(solver_cls, f"{solver_name} should be retrievable from registry")
                self.assertTrue(
                    issubclass(solver_cls, Solver),
                    f"{solver_name} should be a subclass of Solver",
                )
        self.assertIsNone(SOLVERS.get("non_existent_solver"))

    def test_constraint_registry_mapping(self):
        for rule_name in ("row", "column", "box"):
            with self.subTest(rule_name=rule_name):
                self.assertTrue(callable(CONSTRAINTS.get(rule_name)))
        self.assertIsNone(CONSTRAINTS.get("non_existent_rule"))

    def test_register_module(self):
        registry = Registry("test")

        @registry.register_module("foo")
        class Foo:
            pass

        self.assertIs(registry.get("foo"), Foo)
        self.assertIn("foo", registry)
        with self.assertRaises(KeyError):
            registry.register_module("foo", Foo)
        registry.register_module("foo", int, force=True)
        self.assertIs(registry.get("foo"), int)

    def test_lazy_default_mapping(self):
        registry = Registry("test", default_mapping={"judge": "sudokugen.grid.judge.SudokuJudge"})
        self.assertIn("judge", registry)
        self.assertEqual(registry.modules, {})
        from sudokugen.grid.judge import SudokuJudge

        self.assertIs(registry.get("judge"), SudokuJudge)
        self.assertEqual(registry.list(), ["judge"])
