"""Puzzle description types: operators, cages and whole puzzles."""

from __future__ import annotations
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Sequence

Cell = Tuple[int, int]


class Operator(Enum):
    """Arithmetic operator attached to a cage."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    EQUAL = "="

    @classmethod
    def parse(cls, symbol: Any) -> Operator:
        """
        Convert a symbol to an Operator.

        Accepts the canonical ASCII symbols as well as the typographic
        forms used on printed puzzles (−, ×, x, ÷).

        Raises:
            ValueError: If the symbol is not a known operator.
        """
        if isinstance(symbol, Operator):
            return symbol
        key = str(symbol).strip()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown cage operator: {symbol!r}") from None

    @property
    def is_binary(self) -> bool:
        """Whether the operator is only defined for two-cell cages."""
        return self in (Operator.SUBTRACT, Operator.DIVIDE)

    def __str__(self) -> str:
        return self.value


_ALIASES = {
    "−": "-",
    "–": "-",
    "×": "*",
    "x": "*",
    "X": "*",
    "÷": "/",
}


def _as_int(value: Any, what: str) -> int:
    """Convert value to int, refusing booleans and non-integral numbers."""
    if isinstance(value, bool):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"{what} must be an integer, got {value!r}") from None
    if isinstance(value, float) and number != value:
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return number


def _as_cell(cell: Any) -> Cell:
    if not isinstance(cell, (list, tuple)) or len(cell) != 2:
        raise ValueError(f"Cage cell must be a [row, col] pair, got {cell!r}")
    return _as_int(cell[0], "Cell row"), _as_int(cell[1], "Cell column")


@dataclass(frozen=True)
class Cage:
    """
    A group of cells bound by one operator and a target value.

    Cells are 0-based (row, col) pairs. A single-cell cage is normally
    tagged with Operator.EQUAL, forcing the cell to hold the target.
    """
    cells: Tuple[Cell, ...]
    target: int
    op: Operator

    def __post_init__(self):
        if not isinstance(self.cells, (list, tuple)):
            raise ValueError(f"Cage cells must be a list of [row, col] pairs, got {self.cells!r}")
        object.__setattr__(self, "cells", tuple(_as_cell(cell) for cell in self.cells))
        object.__setattr__(self, "target", _as_int(self.target, "Cage target"))
        object.__setattr__(self, "op", Operator.parse(self.op))

    def __len__(self) -> int:
        return len(self.cells)

    def to_dict(self) -> Dict[str, Any]:
        """Convert cage to its JSON-compatible dictionary."""
        return {
            "cells": [[r, c] for r, c in self.cells],
            "target": self.target,
            "op": self.op.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Cage:
        """Create a cage from a dictionary with cells, target and op keys."""
        try:
            cells = data["cells"]
            target = data["target"]
            op = data["op"]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Cage must define cells, target and op: {data!r}") from e
        return cls(cells=cells, target=target, op=op)


@dataclass(frozen=True)
class Puzzle:
    """
    A KenKen puzzle: grid size plus the cages covering it.

    The cages are expected to partition the size x size grid. Nothing
    here enforces that; see kenken.core.validator.validate_puzzle.
    """
    size: int
    cages: Tuple[Cage, ...]

    def __post_init__(self):
        object.__setattr__(self, "size", _as_int(self.size, "Puzzle size"))
        object.__setattr__(self, "cages", tuple(self.cages))

    @property
    def cell_count(self) -> int:
        """Number of cells in the grid."""
        return self.size * self.size

    @classmethod
    def from_cages(cls, size: int, cages: Sequence[Tuple[Sequence[Cell], int, Any]]) -> Puzzle:
        """Create a puzzle from (cells, target, op) triples."""
        return cls(size, [Cage(cells, target, op) for cells, target, op in cages])

    def to_dict(self) -> Dict[str, Any]:
        """Convert puzzle to its JSON-compatible dictionary."""
        return {
            "size": self.size,
            "cages": [cage.to_dict() for cage in self.cages],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Puzzle:
        """Create a puzzle from a dictionary with size and cages keys."""
        if not isinstance(data, dict) or "size" not in data:
            raise ValueError("Puzzle must be an object with a 'size' key")
        cages = data.get("cages", [])
        if not isinstance(cages, list):
            raise ValueError(f"Puzzle cages must be a list, got {cages!r}")
        cages = [Cage.from_dict(c) for c in cages]
        return cls(size=data["size"], cages=cages)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, text: str) -> Puzzle:
        return cls.from_dict(json.loads(text))

    def save(self, path: str) -> None:
        """Write the puzzle to a JSON file."""
        with open(path, "w") as f:
            f.write(self.to_json())

    @classmethod
    def load(cls, path: str) -> Puzzle:
        """Read a puzzle from a JSON file."""
        with open(path, "r") as f:
            return cls.from_json(f.read())
