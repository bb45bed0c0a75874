"""Benchmarking framework for comparing KenKen solvers."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Dict, Any, Optional, Type
import json
import logging
import multiprocessing as mp
import os
import time

from tqdm import tqdm

from ..core.cage import Puzzle
from ..solvers import BaseSolver, BacktrackingSolver, StackSolver, SolverStats

logger = logging.getLogger(__name__)

# First message from a worker; the timeout is measured from it, not from spawn
_STARTED = "started"


@dataclass
class BenchmarkResult:
    """Results from a single benchmark run."""
    puzzle_name: str
    size: int
    algorithm: str
    solved: bool
    time_seconds: float
    memory_bytes: int
    iterations: int
    backtracks: int
    nodes_explored: int
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "puzzle_name": self.puzzle_name,
            "size": self.size,
            "algorithm": self.algorithm,
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "memory_mb": self.memory_bytes / (1024 * 1024),
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            **self.extra
        }


def load_puzzles(directory: str) -> Dict[str, Puzzle]:
    """
    Load every *.json puzzle file in a directory.

    Returns:
        Mapping of file stem -> Puzzle, in sorted file name order.
    """
    puzzles = {}
    for file_name in sorted(os.listdir(directory)):
        if not file_name.endswith(".json"):
            continue
        path = os.path.join(directory, file_name)
        puzzles[os.path.splitext(file_name)[0]] = Puzzle.load(path)
    logger.info("Loaded %d puzzles from %s", len(puzzles), directory)
    return puzzles


def _solve_worker(conn, solver_cls: Type[BaseSolver], puzzle: Puzzle) -> None:
    """Child-process entry point: announce start, solve once, send the stats back."""
    try:
        conn.send(_STARTED)
        _, stats = solver_cls().solve(puzzle)
        conn.send(stats)
    finally:
        conn.close()


def _terminate_process(proc: mp.Process, grace: float = 0.2) -> None:
    """Stop proc, escalating from terminate to kill."""
    proc.join(timeout=grace)
    if proc.is_alive():
        proc.terminate()
        proc.join(timeout=grace)
    if proc.is_alive():
        proc.kill()
        proc.join(timeout=grace)


class Benchmark:
    """
    Benchmark framework for comparing KenKen solving algorithms.

    Runs every solver on every puzzle and collects performance metrics.
    Each run gets a fresh solver in its own process, which is terminated
    once the timeout expires.
    """

    DEFAULT_SOLVERS: Dict[str, Type[BaseSolver]] = {
        "Recursive": BacktrackingSolver,
        "Stack": StackSolver,
    }

    def __init__(
        self,
        puzzles: Dict[str, Puzzle],
        solvers: Optional[Dict[str, Type[BaseSolver]]] = None,
        timeout_seconds: float = 60.0
    ):
        """
        Initialize the benchmark.

        Args:
            puzzles: Dict of puzzle_name -> puzzle.
            solvers: Dict of solver_name -> solver class (default: all).
            timeout_seconds: Maximum time per puzzle per solver.
        """
        self.puzzles = puzzles
        self.timeout_seconds = timeout_seconds
        self.solvers = dict(solvers or self.DEFAULT_SOLVERS)
        self.results: List[BenchmarkResult] = []

    def run(self, show_progress: bool = True) -> List[BenchmarkResult]:
        """
        Run the full benchmark suite.

        Returns:
            List of BenchmarkResult objects.
        """
        self.results = []
        total_tests = len(self.puzzles) * len(self.solvers)

        pbar = tqdm(total=total_tests, desc="Benchmarking", disable=not show_progress)

        for puzzle_name, puzzle in self.puzzles.items():
            for solver_name, solver_cls in self.solvers.items():
                result = self._run_single(puzzle, puzzle_name, solver_name, solver_cls)
                self.results.append(result)
                pbar.update(1)

        pbar.close()
        return self.results

    def _run_single(
        self,
        puzzle: Puzzle,
        puzzle_name: str,
        solver_name: str,
        solver_cls: Type[BaseSolver]
    ) -> BenchmarkResult:
        """Run a fresh solver on a single puzzle in a child process."""
        parent, child = mp.Pipe(duplex=False)
        proc = mp.Process(target=_solve_worker, args=(child, solver_cls, puzzle))
        proc.daemon = True
        proc.start()
        child.close()

        deadline: Optional[float] = None
        stats: Optional[SolverStats] = None
        error = None
        try:
            while True:
                wait = 0.05
                if deadline is not None:
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        error = "Timeout"
                        break
                    wait = min(wait, remaining)
                if parent.poll(wait):
                    message = parent.recv()
                    if deadline is None and message == _STARTED:
                        deadline = time.monotonic() + self.timeout_seconds
                        continue
                    stats = message
                    break
                if not proc.is_alive() and not parent.poll(0):
                    error = f"Solver process exited with code {proc.exitcode}"
                    break
        except EOFError:
            error = f"Solver process exited with code {proc.exitcode}"
        finally:
            _terminate_process(proc)
            parent.close()

        if stats is None:
            if error == "Timeout":
                logger.warning("%s timed out on %s after %.1fs",
                               solver_name, puzzle_name, self.timeout_seconds)
            else:
                logger.warning("%s failed on %s: %s", solver_name, puzzle_name, error)
            return self._failed_result(puzzle, puzzle_name, solver_name, error)

        return BenchmarkResult(
            puzzle_name=puzzle_name,
            size=puzzle.size,
            algorithm=solver_name,
            solved=stats.solved,
            time_seconds=stats.time_seconds,
            memory_bytes=stats.memory_bytes,
            iterations=stats.iterations,
            backtracks=stats.backtracks,
            nodes_explored=stats.nodes_explored,
            extra=dict(stats.extra)
        )

    def _failed_result(
        self,
        puzzle: Puzzle,
        puzzle_name: str,
        solver_name: str,
        error: str
    ) -> BenchmarkResult:
        return BenchmarkResult(
            puzzle_name=puzzle_name,
            size=puzzle.size,
            algorithm=solver_name,
            solved=False,
            time_seconds=self.timeout_seconds,
            memory_bytes=0,
            iterations=0,
            backtracks=0,
            nodes_explored=0,
            extra={"error": error}
        )

    def get_summary(self) -> Dict[str, Any]:
        """Get summary statistics from benchmark results."""
        sizes = sorted({p.size for p in self.puzzles.values()})
        summary = {
            "total_puzzles": len(self.puzzles),
            "solvers_tested": list(self.solvers.keys()),
            "sizes": sizes,
            "results_by_algorithm": {},
            "results_by_size": {}
        }

        # Group by algorithm
        for solver_name in self.solvers:
            solver_results = [r for r in self.results if r.algorithm == solver_name]
            if solver_results:
                solved = [r for r in solver_results if r.solved]
                times = [r.time_seconds for r in solver_results]
                memory = [r.memory_bytes for r in solver_results]

                summary["results_by_algorithm"][solver_name] = {
                    "solved_rate": len(solved) / len(solver_results) * 100,
                    "avg_time_seconds": sum(times) / len(times),
                    "max_time_seconds": max(times),
