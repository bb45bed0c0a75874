"""
Partial-assignment checks for single cages.

Each check looks at the current values of a cage's cells (0 for cells
still unassigned) and answers whether the cage can still be satisfied.
The answer may be optimistic while cells remain empty, since every
remaining cell is assumed free to take any value 1..n regardless of
row and column uniqueness. It is never pessimistic: a value that can
lead to a solution is never rejected. Once every cell is filled the
answer is exact.
"""

from __future__ import annotations
from enum import Enum
from typing import List

import numpy as np

from ..core.cage import Cage, Operator


class CageStatus(Enum):
    """Three-way verdict for a cage under a partial grid."""
    VIOLATED = "violated"
    SATISFIABLE = "satisfiable"
    SATISFIED = "satisfied"


def cage_values(cage: Cage, grid: np.ndarray) -> List[int]:
    """Current values of the cage's cells, 0 for unassigned."""
    return [int(grid[r, c]) for r, c in cage.cells]


def is_cage_feasible(cage: Cage, grid: np.ndarray) -> bool:
    """
    Check whether a cage is still possibly satisfiable.

    Args:
        cage: The cage to check.
        grid: The n x n value array, read only.

    Returns:
        True if the cage may still be completed to its target (or, when
        fully filled, meets it exactly).
    """
    n = grid.shape[0]
    values = cage_values(cage, grid)
    unassigned = values.count(0)
    target = cage.target
    op = cage.op

    if op is Operator.ADD:
        return _sum_feasible(sum(values), unassigned, target, n)
    if op is Operator.MULTIPLY:
        return _product_feasible(values, unassigned, target, n)
    if op is Operator.SUBTRACT:
        if len(values) != 2:
            return _fallback_pair_check(values, unassigned, lambda a, b: abs(a - b) == target)
        return _difference_feasible(values, unassigned, target, n)
    if op is Operator.DIVIDE:
        if len(values) != 2:
            return _fallback_pair_check(values, unassigned, lambda a, b: _is_ratio(a, b, target))
        return _quotient_feasible(values, unassigned, target, n)
    if op is Operator.EQUAL:
        return bool(values) and (values[0] == 0 or values[0] == target)

    return False


def cage_status(cage: Cage, grid: np.ndarray) -> CageStatus:
    """Classify a cage as violated, still satisfiable, or satisfied."""
    if not is_cage_feasible(cage, grid):
        return CageStatus.VIOLATED
    if all(cage_values(cage, grid)):
        return CageStatus.SATISFIED
    return CageStatus.SATISFIABLE


def _sum_feasible(total: int, unassigned: int, target: int, n: int) -> bool:
    if unassigned == 0:
        return total == target
    # Each remaining cell adds at least 1.
    if total >= target:
        return False
    return total + unassigned <= target <= total + n * unassigned


def _product_feasible(values: List[int], unassigned: int, target: int, n: int) -> bool:
    product = 1
    for v in values:
        if v:
            product *= v
    if product > target or target % product != 0:
        return False
    if unassigned == 0:
        return product == target
    return product * n ** unassigned >= target


def _difference_feasible(values: List[int], unassigned: int, target: int, n: int) -> bool:
    if unassigned == 2:
        return True
    if unassigned == 0:
        return abs(values[0] - values[1]) == target
    known = values[0] or values[1]
    return 1 <= known + target <= n or 1 <= known - target <= n


def _quotient_feasible(values: List[int], unassigned: int, target: int, n: int) -> bool:
    if unassigned == 2:
        return True
    if unassigned == 0:
        return _is_ratio(values[0], values[1], target)
    known = values[0] or values[1]
    if target > 0 and known % target == 0 and 1 <= known // target <= n:
        return True
    return 1 <= known * target <= n


def _is_ratio(a: int, b: int, target: int) -> bool:
    """Whether the larger of a and b is exactly target times the smaller."""
    hi, lo = max(a, b), min(a, b)
    return hi == lo * target


def _fallback_pair_check(values: List[int], unassigned: int, check) -> bool:
    """
    Difference and quotient cages without exactly two cells.

    Accepted while incomplete; once complete only the first two values
    are compared. A complete cage with fewer than two cells never holds.
    """
    if unassigned:
        return True
    if len(values) < 2:
        return False
    return check(values[0], values[1])
