"""KenKen grid representation with row and column usage tracking."""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, Optional


class KenKenGrid:
    """
    An n x n grid of values 1..n, with 0 meaning unassigned.

    Alongside the grid, two boolean tables record which values are
    already used in each row and each column. They are a cache derived
    from the grid and are only ever changed through place() and clear(),
    which keep all three structures in step.
    """

    def __init__(self, size: int, grid: Optional[np.ndarray] = None):
        """
        Initialize a grid.

        Args:
            size: Number of rows (and columns).
            grid: Optional initial values. If None, creates an empty grid.
        """
        if size < 0:
            raise ValueError(f"Size must be non-negative, got {size}")

        self.size = size
        self.grid = np.zeros((size, size), dtype=np.int32)
        self.row_used = np.zeros((size, size + 1), dtype=bool)
        self.col_used = np.zeros((size, size + 1), dtype=bool)

        if grid is not None:
            grid = np.asarray(grid)
            if grid.shape != (size, size):
                raise ValueError(f"Grid shape must be ({size}, {size})")
            for row in range(size):
                for col in range(size):
                    value = int(grid[row, col])
                    if value:
                        self.place(row, col, value)

    def copy(self) -> KenKenGrid:
        """Create a deep copy of the grid and its usage tables."""
        new_grid = KenKenGrid(self.size)
        new_grid.grid = self.grid.copy()
        new_grid.row_used = self.row_used.copy()
        new_grid.col_used = self.col_used.copy()
        return new_grid

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        return self.grid[row, col] == 0

    def is_used(self, row: int, col: int, value: int) -> bool:
        """Check if value already appears in the row or the column."""
        return bool(self.row_used[row, value] or self.col_used[col, value])

    def place(self, row: int, col: int, value: int) -> None:
        """
        Write value at (row, col) and mark it used in the row and column.

        The cell must be empty; a value already sitting in the cell is
        cleared first so the usage tables never hold stale marks.
        """
        if value < 1 or value > self.size:
            raise ValueError(f"Value must be 1-{self.size}, got {value}")
        if self.grid[row, col]:
            self.clear(row, col)
        self.grid[row, col] = value
        self.row_used[row, value] = True
        self.col_used[col, value] = True

    def clear(self, row: int, col: int) -> None:
        """Empty the cell at (row, col) and release its usage marks."""
        value = self.grid[row, col]
        if value:
            self.row_used[row, value] = False
            self.col_used[col, value] = False
            self.grid[row, col] = 0

    def empty_cells(self) -> List[Tuple[int, int]]:
        """Get all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == 0)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        return int(np.sum(self.grid == 0))

    def count_filled(self) -> int:
        return int(np.sum(self.grid != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_latin_square(self) -> bool:
        """Check if every row and every column is a permutation of 1..n."""
        if not self.is_complete():
            return False
        expected = np.arange(1, self.size + 1)
        for i in range(self.size):
            if not np.array_equal(np.sort(self.grid[i, :]), expected):
                return False
            if not np.array_equal(np.sort(self.grid[:, i]), expected):
                return False
        return True

    def to_list(self) -> List[List[int]]:
        """Convert the grid to a plain list of rows."""
        return [[int(v) for v in row] for row in self.grid]

    def to_string(self) -> str:
        """Compact row-major string, 0 for empty cells."""
        return ''.join(str(int(v)) for v in self.grid.flatten())

    @classmethod
    def from_2d_list(cls, data: List[List[int]]) -> KenKenGrid:
        """Create a grid from a 2D list."""
        arr = np.array(data, dtype=np.int32)
        if arr.ndim != 2:
            raise ValueError("Grid data must be a list of rows")
        return cls(arr.shape[0], arr)

    def __str__(self) -> str:
        """Pretty-print the grid."""
        width = len(str(self.size))
        horizontal_sep = '+' + '-' * (self.size * (width + 1) + 1) + '+'
        lines = [horizontal_sep]
        for i in range(self.size):
            cells = []
            for j in range(self.size):
                val = self.grid[i, j]
                cells.append('.'.rjust(width) if val == 0 else str(val).rjust(width))
            lines.append('| ' + ' '.join(cells) + ' |')
        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"KenKenGrid(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KenKenGrid):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash((self.size, self.to_string()))
