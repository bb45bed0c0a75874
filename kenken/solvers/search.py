"""Search session shared by the KenKen solvers."""

from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple

from ..core.cage import Cage, Puzzle
from ..core.grid import KenKenGrid
from .oracle import is_cage_feasible

logger = logging.getLogger(__name__)

# Smaller grids are rejected before any search.
MIN_SIZE = 2

Cell = Tuple[int, int]


class SearchState:
    """
    Mutable state for one solve of one puzzle.

    Holds the working grid (with its row/column usage tables) and the
    cell -> cage index. A solver builds a fresh instance per call through
    SearchState.start() and drops it afterwards; nothing is shared
    between solves.
    """

    def __init__(self, puzzle: Puzzle):
        self.puzzle = puzzle
        self.size = puzzle.size
        self.grid = KenKenGrid(puzzle.size)
        self.cage_of: Dict[Cell, Cage] = {}
        # Overlapping cages: the last one registered for a cell wins.
        for cage in puzzle.cages:
            for cell in cage.cells:
                self.cage_of[cell] = cage
        self.preseeded = 0

    @classmethod
    def start(cls, puzzle: Puzzle) -> Optional[SearchState]:
        """
        Build the state for a puzzle and place all single-cell cages.

        Returns:
            The ready state, or None if the puzzle is rejected up front
            (grid too small, or a single-cell cage that cannot be placed).
        """
        if puzzle.size < MIN_SIZE:
            logger.debug("Rejecting puzzle of size %d", puzzle.size)
            return None

        state = cls(puzzle)
        if not state.preseed():
            return None
        return state

    def preseed(self) -> bool:
        """
        Assign every single-cell cage its target.

        Returns:
            False if a target is out of range, lies outside the grid, or
            clashes with a value already in the same row or column.
        """
        n = self.size
        for cage in self.puzzle.cages:
            if len(cage.cells) != 1:
                continue
            row, col = cage.cells[0]
            value = cage.target
            if not (0 <= row < n and 0 <= col < n):
                logger.debug("Single-cell cage at %s lies outside the grid", (row, col))
                return False
            if value < 1 or value > n:
                logger.debug("Single-cell cage at %s has out-of-range target %d", (row, col), value)
                return False
            if not self.grid.is_empty(row, col) or self.grid.is_used(row, col, value):
                logger.debug("Single-cell cage at %s conflicts on value %d", (row, col), value)
                return False
            self.grid.place(row, col, value)
            self.preseeded += 1
        return True

    def cage_ok(self, row: int, col: int) -> bool:
        """Run the oracle on the cage owning (row, col); unowned cells pass."""
        cage = self.cage_of.get((row, col))
        if cage is None:
            return True
        return is_cage_feasible(cage, self.grid.grid)

    def candidates(self, row: int, col: int) -> List[int]:
        """
        Values the empty cell (row, col) could take right now, ascending.

        Each value not yet used in the row or column is placed on trial,
        checked against the owning cage and then removed again, so the
        grid is unchanged on return.
        """
        grid = self.grid
        out = []
        for value in range(1, self.size + 1):
            if grid.is_used(row, col, value):
                continue
            grid.place(row, col, value)
            ok = self.cage_ok(row, col)
            grid.clear(row, col)
            if ok:
                out.append(value)
        return out

    def select_cell(self) -> Tuple[Optional[Cell], List[int]]:
        """
        Pick the next cell to branch on (minimum remaining values).

        Empty cells are scanned in row-major order. The scan stops early
        on a cell with no candidates (a dead end) or with exactly one.

        Returns:
            (cell, candidates). cell is None when the grid is full; an
            empty candidate list with a cell means the branch is dead.
        """
        best_cell = None
        best_candidates: List[int] = []

        for cell in self.grid.empty_cells():
            cands = self.candidates(*cell)
            if not cands:
                return cell, []
            if best_cell is None or len(cands) < len(best_candidates):
                best_cell = cell
                best_candidates = cands
                if len(cands) == 1:
                    break

        return best_cell, best_candidates

    def all_cages_satisfied(self) -> bool:
        """Check every cage against the (full) grid."""
        return all(is_cage_feasible(cage, self.grid.grid) for cage in self.puzzle.cages)
