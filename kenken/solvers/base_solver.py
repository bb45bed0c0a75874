"""Base solver interface and common utilities."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Dict, Any
import logging
import time
import tracemalloc

from ..core.cage import Puzzle
from ..core.grid import KenKenGrid
from ..core.validator import check_solution

logger = logging.getLogger(__name__)


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Search metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class BaseSolver(ABC):
    """Abstract base class for KenKen solvers."""

    name: str = "BaseSolver"

    def __init__(self, track_memory: bool = True):
        """
        Args:
            track_memory: Record peak allocation with tracemalloc. Tracing is
                process-wide, so concurrent solves in one process (threads)
                must turn it off; memory_bytes is then reported as 0.
        """
        self.track_memory = track_memory
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, puzzle: Puzzle) -> tuple[Optional[KenKenGrid], SolverStats]:
        """
        Solve a KenKen puzzle with timing and memory tracking.

        Args:
            puzzle: The puzzle to solve. It is never modified.

        Returns:
            Tuple of (solution or None, stats).
        """
        self.stats = SolverStats(algorithm=self.name)
        logger.debug("%s: solving %dx%d puzzle with %d cages",
                     self.name, puzzle.size, puzzle.size, len(puzzle.cages))

        if self.track_memory:
            tracemalloc.start()
        start_time = time.perf_counter()

        try:
            solution = self._solve(puzzle)
            self.stats.solved = solution is not None and check_solution(puzzle, solution)
        except Exception as e:
            logger.exception("%s: solver raised on puzzle", self.name)
            self.stats.extra["error"] = str(e)
            solution = None

        self.stats.time_seconds = time.perf_counter() - start_time

        if self.track_memory:
            _, peak = tracemalloc.get_traced_memory()
            tracemalloc.stop()
            self.stats.memory_bytes = peak

        if not self.stats.solved:
            solution = None
        logger.debug("%s: %s in %.4fs (%d iterations, %d backtracks)",
                     self.name, "solved" if self.stats.solved else "no solution",
                     self.stats.time_seconds, self.stats.iterations, self.stats.backtracks)
        return solution, self.stats

    @abstractmethod
    def _solve(self, puzzle: Puzzle) -> Optional[KenKenGrid]:
        """
        Internal solve method to be implemented by subclasses.

        Args:
            puzzle: The puzzle to solve.

        Returns:
            The solved grid, or None if no solution exists.
        """
        pass
