"""Solvers module for KenKen puzzles."""

from .base_solver import BaseSolver, SolverStats
from .oracle import CageStatus, cage_status, is_cage_feasible
from .search import SearchState
from .backtracking_solver import BacktrackingSolver, solve_kenken
from .stack_solver import StackSolver

__all__ = [
    "BaseSolver",
    "SolverStats",
    "CageStatus",
    "cage_status",
    "is_cage_feasible",
    "SearchState",
    "BacktrackingSolver",
    "StackSolver",
    "solve_kenken",
]
