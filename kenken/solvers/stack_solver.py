"""Backtracking solver driven by an explicit stack instead of recursion."""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .base_solver import BaseSolver
from .search import SearchState
from ..core.cage import Puzzle
from ..core.grid import KenKenGrid


@dataclass
class SearchFrame:
    """One branching point: a cell and the values still left to try."""
    cell: Tuple[int, int]
    values: Iterator[int]
    placed: bool = False


class StackSolver(BaseSolver):
    """
    Same search as BacktrackingSolver, without deep Python call stacks.

    Cells and values are explored in exactly the same order as the
    recursive solver, so both return the same grid for the same puzzle.
    """

    name = "Stack Backtracking"

    def _solve(self, puzzle: Puzzle) -> Optional[KenKenGrid]:
        """Solve using iterative DFS with an explicit frame stack."""
        self.stats.iterations = 0
        self.stats.backtracks = 0
        self.stats.nodes_explored = 0

        state = SearchState.start(puzzle)
        if state is None:
            return None
        self.stats.extra["preseeded"] = state.preseeded

        stack: List[SearchFrame] = []
        while True:
            self.stats.iterations += 1

            cell, candidates = state.select_cell()
            if cell is None:
                if state.all_cages_satisfied():
                    return state.grid
            elif not candidates:
                self.stats.backtracks += 1
            else:
                self.stats.nodes_explored += 1
                stack.append(SearchFrame(cell, iter(candidates)))

            if not self._advance(state, stack):
                return None

    def _advance(self, state: SearchState, stack: List[SearchFrame]) -> bool:
        """
        Move to the next viable assignment.

        Undoes the placement of the top frame (if any), tries its
        remaining values, and pops exhausted frames.

        Returns:
            False once the stack is empty (search exhausted).
        """
        while stack:
            frame = stack[-1]
            row, col = frame.cell

            if frame.placed:
                state.grid.clear(row, col)
                frame.placed = False
                self.stats.backtracks += 1

            for value in frame.values:
                state.grid.place(row, col, value)
                if state.cage_ok(row, col):
                    frame.placed = True
                    return True
                state.grid.clear(row, col)
                self.stats.backtracks += 1

            stack.pop()

        return False
