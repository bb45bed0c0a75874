"""Recursive backtracking solver with MRV cell selection."""

from __future__ import annotations
from typing import List, Optional

from .base_solver import BaseSolver
from .search import SearchState
from ..core.cage import Puzzle
from ..core.grid import KenKenGrid


class BacktrackingSolver(BaseSolver):
    """
    Depth-first search over cell assignments using recursive backtracking.

    Features:
    - Single-cell cages placed before the search starts
    - Minimum Remaining Values (MRV) heuristic for cell selection
    - Per-cage partial checks to prune values as soon as a cage breaks
    - Candidates tried in ascending order, so results are deterministic
    """

    name = "Recursive Backtracking"

    def _solve(self, puzzle: Puzzle) -> Optional[KenKenGrid]:
        """Solve using recursive DFS with backtracking."""
        self.stats.iterations = 0
        self.stats.backtracks = 0
        self.stats.nodes_explored = 0

        state = SearchState.start(puzzle)
        if state is None:
            return None
        self.stats.extra["preseeded"] = state.preseeded

        if self._backtrack(state):
            return state.grid
        return None

    def _backtrack(self, state: SearchState) -> bool:
        """
        Recursive backtracking algorithm.

        Returns True if solution found, False otherwise. On success the
        grid is left holding the solution.
        """
        self.stats.iterations += 1

        cell, candidates = state.select_cell()
        if cell is None:
            # Full grid: every cage must now hold exactly
            return state.all_cages_satisfied()

        # An empty cell with no legal value - need to backtrack
        if not candidates:
            self.stats.backtracks += 1
            return False

        row, col = cell
        self.stats.nodes_explored += 1

        for value in candidates:
            state.grid.place(row, col, value)

            if state.cage_ok(row, col) and self._backtrack(state):
                return True

            state.grid.clear(row, col)
            self.stats.backtracks += 1

        return False


def solve_kenken(puzzle: Puzzle) -> Optional[List[List[int]]]:
    """
    Solve a puzzle and return the grid as a list of rows.

    Memory is not traced, so this is safe to call from several threads.

    Returns:
        The n x n solution, or None when the puzzle has no solution.
    """
    solution, _ = BacktrackingSolver(track_memory=False).solve(puzzle)
    if solution is None:
        return None
    return solution.to_list()
