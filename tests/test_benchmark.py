"""Tests for the solver benchmark."""

import json
import os

import pytest
from kenken.core.cage import Puzzle
from kenken.benchmark import Benchmark, load_puzzles
from kenken.solvers import BacktrackingSolver


SOLVABLE = Puzzle.from_cages(3, [
    ([(0, 0), (1, 0)], 2, "*"),
    ([(0, 1), (0, 2)], 5, "+"),
    ([(1, 1), (1, 2), (2, 2)], 6, "*"),
    ([(2, 0), (2, 1)], 2, "-"),
])

UNSOLVABLE = Puzzle.from_cages(2, [
    ([(0, 0), (0, 1)], 5, "+"),
    ([(1, 0), (1, 1)], 3, "+"),
])


# Every 5x5 Latin square sums to 75, so the search enumerates them all
# before giving up. Far longer than the short timeout used below.
SLOW = Puzzle.from_cages(5, [
    ([(r, c) for r in range(5) for c in range(5)], 74, "+"),
])


@pytest.fixture
def benchmark():
    return Benchmark({"solvable": SOLVABLE, "unsolvable": UNSOLVABLE}, timeout_seconds=30.0)


class TestBenchmark:
    """Tests for Benchmark."""

    def test_run_covers_every_pair(self, benchmark):
        results = benchmark.run(show_progress=False)

        assert len(results) == 4
        solved = {(r.puzzle_name, r.algorithm): r.solved for r in results}
        assert solved[("solvable", "Recursive")]
        assert solved[("solvable", "Stack")]
        assert not solved[("unsolvable", "Recursive")]
        assert not solved[("unsolvable", "Stack")]

    def test_summary(self, benchmark):
        benchmark.run(show_progress=False)
        summary = benchmark.get_summary()

        assert summary["total_puzzles"] == 2
        assert summary["sizes"] == [2, 3]
        assert summary["results_by_algorithm"]["Recursive"]["solved_rate"] == 50.0
        assert summary["results_by_size"]["3x3"]["Stack"]["solved"] == 1

    def test_save_results(self, benchmark, tmp_path):
        benchmark.run(show_progress=False)
        benchmark.save_results(str(tmp_path))

        with open(tmp_path / "benchmark_results.json") as f:
            rows = json.load(f)
        assert len(rows) == 4
        assert {"puzzle_name", "size", "algorithm", "solved", "memory_mb"} <= set(rows[0])
        assert os.path.exists(tmp_path / "benchmark_summary.json")

    def test_timeout_does_not_leak_into_next_run(self):
        _, clean_stats = BacktrackingSolver().solve(SOLVABLE)
        benchmark = Benchmark(
            {"slow": SLOW, "fast": SOLVABLE},
            solvers={"Recursive": BacktrackingSolver},
            timeout_seconds=0.2,
        )

        slow, fast = benchmark.run(show_progress=False)

        assert not slow.solved
        assert slow.extra["error"] == "Timeout"
        assert fast.solved
        assert fast.iterations == clean_stats.iterations
        assert fast.backtracks == clean_stats.backtracks
        assert fast.nodes_explored == clean_stats.nodes_explored

    def test_custom_solver_classes(self):
        benchmark = Benchmark({"solvable": SOLVABLE}, solvers={"Only": BacktrackingSolver})
        [result] = benchmark.run(show_progress=False)
        assert result.algorithm == "Only"
        assert result.solved
        assert result.memory_bytes > 0


def test_load_puzzles(tmp_path):
    SOLVABLE.save(str(tmp_path / "b.json"))
    UNSOLVABLE.save(str(tmp_path / "a.json"))
    (tmp_path / "notes.txt").write_text("ignored")

    puzzles = load_puzzles(str(tmp_path))

    assert list(puzzles) == ["a", "b"]
    assert puzzles["b"] == SOLVABLE


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
