from sudokugen.solver.budget import SolveBudget
from sudokugen.solver.solver import SOLVERS, Solver, build_solver

__all__ = [
    "SOLVERS",
    "Solver",
    "SolveBudget",
    "build_solver",
]
