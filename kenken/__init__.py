"""KenKen puzzle solver: cages, grids and MRV backtracking search."""

from .core.cage import Operator, Cage, Puzzle
from .core.grid import KenKenGrid
from .solvers import BacktrackingSolver, StackSolver, solve_kenken

__version__ = "1.0.0"

__all__ = [
    "Operator",
    "Cage",
    "Puzzle",
    "KenKenGrid",
    "BacktrackingSolver",
    "StackSolver",
    "solve_kenken",
]
