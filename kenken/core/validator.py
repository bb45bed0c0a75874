"""Validation utilities for KenKen puzzles and solutions."""

from __future__ import annotations
from math import prod
from typing import List, Sequence, Union, TYPE_CHECKING

import numpy as np

from .cage import Cage, Operator

if TYPE_CHECKING:
    from .cage import Puzzle
    from .grid import KenKenGrid


def validate_puzzle(puzzle: Puzzle) -> List[str]:
    """
    Check that a puzzle is well formed before handing it to a solver.

    The solver trusts its input; this is the check callers run first.

    Args:
        puzzle: The puzzle to inspect.

    Returns:
        A list of human-readable problems, empty if the puzzle is sound.
    """
    problems = []
    n = puzzle.size

    if n < 2:
        problems.append(f"Grid size must be at least 2, got {n}")
        return problems

    owner = {}
    for index, cage in enumerate(puzzle.cages):
        label = f"Cage {index} ({cage.op.value}{cage.target})"

        if not cage.cells:
            problems.append(f"{label} has no cells")
            continue
        if cage.target < 1:
            problems.append(f"{label} has non-positive target")
        if cage.op.is_binary and len(cage.cells) != 2:
            problems.append(f"{label} must have exactly 2 cells, has {len(cage.cells)}")
        if cage.op is Operator.EQUAL and len(cage.cells) != 1:
            problems.append(f"{label} must have exactly 1 cell, has {len(cage.cells)}")
        if len(cage.cells) == 1 and not 1 <= cage.target <= n:
            problems.append(f"{label} target is outside 1-{n}")

        for cell in cage.cells:
            row, col = cell
            if not (0 <= row < n and 0 <= col < n):
                problems.append(f"{label} cell {cell} is outside the grid")
            elif cell in owner:
                problems.append(f"{label} cell {cell} overlaps cage {owner[cell]}")
            else:
                owner[cell] = index

    missing = [(r, c) for r in range(n) for c in range(n) if (r, c) not in owner]
    if missing:
        shown = ", ".join(str(cell) for cell in missing[:5])
        more = f" and {len(missing) - 5} more" if len(missing) > 5 else ""
        problems.append(f"{len(missing)} cell(s) not covered by any cage: {shown}{more}")

    return problems


def is_valid_puzzle(puzzle: Puzzle) -> bool:
    """Check if a puzzle is well formed (see validate_puzzle)."""
    return not validate_puzzle(puzzle)


def cage_holds(cage: Cage, values: Sequence[int]) -> bool:
    """
    Check a fully filled cage against its target.

    Difference and quotient cages compare their first two values; with
    fewer than two cells they never hold.
    """
    target = cage.target
    op = cage.op

    if op is Operator.ADD:
        return sum(values) == target
    if op is Operator.MULTIPLY:
        return prod(values) == target
    if op is Operator.SUBTRACT:
        return len(values) >= 2 and abs(values[0] - values[1]) == target
    if op is Operator.DIVIDE:
        if len(values) < 2:
            return False
        hi, lo = max(values[0], values[1]), min(values[0], values[1])
        return hi == lo * target
    if op is Operator.EQUAL:
        return len(values) >= 1 and values[0] == target
    return False


def check_solution(puzzle: Puzzle, solution: Union[KenKenGrid, np.ndarray, List[List[int]]]) -> bool:
    """
    Validate that a grid solves the puzzle.

    Args:
        puzzle: The puzzle.
        solution: A KenKenGrid, array or list of rows.

    Returns:
        True if every row and column is a permutation of 1..n and every
        cage meets its target exactly.
    """
    grid = getattr(solution, "grid", solution)
    grid = np.asarray(grid)
    n = puzzle.size

    if grid.shape != (n, n):
        return False

    expected = np.arange(1, n + 1)
    for i in range(n):
        if not np.array_equal(np.sort(grid[i, :]), expected):
            return False
        if not np.array_equal(np.sort(grid[:, i]), expected):
            return False

    for cage in puzzle.cages:
        try:
            values = [int(grid[r, c]) for r, c in cage.cells]
        except IndexError:
            return False
        if not cage_holds(cage, values):
            return False

    return True
