"""Core module for KenKen puzzle, cage and grid representation."""

from .cage import Operator, Cage, Puzzle
from .grid import KenKenGrid
from .validator import validate_puzzle, is_valid_puzzle, check_solution

__all__ = [
    "Operator",
    "Cage",
    "Puzzle",
    "KenKenGrid",
    "validate_puzzle",
    "is_valid_puzzle",
    "check_solution",
]
