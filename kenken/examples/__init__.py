"""Example puzzles bundled with the package, one per grid size."""

from typing import Dict, List
import os

from ..core.cage import Puzzle

EXAMPLES_DIR = os.path.dirname(os.path.abspath(__file__))


def list_examples() -> List[int]:
    """Grid sizes that have a bundled example, smallest first."""
    sizes = []
    for file_name in os.listdir(EXAMPLES_DIR):
        stem, ext = os.path.splitext(file_name)
        rows, _, cols = stem.partition("x")
        if ext == ".json" and rows.isdigit() and rows == cols:
            sizes.append(int(rows))
    return sorted(sizes)


def load_example(size: int) -> Puzzle:
    """
    Load the bundled example puzzle for a grid size.

    Raises:
        ValueError: If no example exists for the size.
    """
    if size not in list_examples():
        raise ValueError(f"No example puzzle for size {size}; available: {list_examples()}")
    return Puzzle.load(os.path.join(EXAMPLES_DIR, f"{size}x{size}.json"))


def load_examples() -> Dict[str, Puzzle]:
    """All bundled examples keyed by name ("3x3", "4x4", ...)."""
    return {f"{size}x{size}": load_example(size) for size in list_examples()}
