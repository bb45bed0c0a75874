"""Tests for the command-line interface."""

import pytest
from kenken.cli import main
from kenken.core.cage import Puzzle


PUZZLE = Puzzle.from_cages(3, [
    ([(0, 0), (1, 0)], 2, "*"),
    ([(0, 1), (0, 2)], 5, "+"),
    ([(1, 1), (1, 2), (2, 2)], 6, "*"),
    ([(2, 0), (2, 1)], 2, "-"),
])


@pytest.fixture
def puzzle_file(tmp_path):
    path = tmp_path / "puzzle.json"
    PUZZLE.save(str(path))
    return str(path)


@pytest.fixture
def partial_file(tmp_path):
    path = tmp_path / "partial.json"
    Puzzle(3, PUZZLE.cages[:2]).save(str(path))
    return str(path)


class TestSolveCommand:
    """Tests for `kenken solve`."""

    def test_solves(self, puzzle_file, capsys):
        assert main(["solve", puzzle_file]) == 0
        out = capsys.readouterr().out
        assert "Solved" in out
        assert "| 1 2 3 |" in out

    def test_all_algorithms_verbose(self, puzzle_file, capsys):
        assert main(["solve", puzzle_file, "--algorithm", "all", "-v"]) == 0
        out = capsys.readouterr().out
        assert "Solving with Recursive" in out
        assert "Solving with Stack" in out
        assert "Backtracks:" in out

    def test_no_solution(self, tmp_path, capsys):
        path = tmp_path / "bad.json"
        Puzzle.from_cages(2, [([(0, 0), (0, 1)], 5, "+"), ([(1, 0), (1, 1)], 3, "+")]).save(str(path))
        assert main(["solve", str(path)]) == 1
        assert "No solution" in capsys.readouterr().out

    def test_validate_refuses_malformed(self, partial_file, capsys):
        assert main(["solve", partial_file, "--validate"]) == 1
        assert "malformed" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["solve", str(tmp_path / "missing.json")]) == 1
        assert "Error reading puzzle" in capsys.readouterr().out

    @pytest.mark.parametrize("text", [
        '{"size": 2, "cages": [{"cells": 5, "target": 3, "op": "+"}]}',
        '{"size": 2, "cages": [{"cells": [1, 2], "target": 3, "op": "+"}]}',
        '{"size": 2, "cages": null}',
        '{"size": 2, "cages": [{"cells": [[0, 0]], "target": 2.7, "op": "="}]}',
        "not json",
    ])
    def test_malformed_puzzle_file(self, tmp_path, capsys, text):
        path = tmp_path / "malformed.json"
        path.write_text(text)
        assert main(["solve", str(path)]) == 1
        assert "Error reading puzzle" in capsys.readouterr().out


class TestCheckCommand:
    """Tests for `kenken check`."""

    def test_ok(self, puzzle_file, capsys):
        assert main(["check", puzzle_file]) == 0
        assert "OK" in capsys.readouterr().out

    def test_reports_problems(self, partial_file, capsys):
        assert main(["check", partial_file]) == 1
        assert "not covered" in capsys.readouterr().out


def test_benchmark_command(tmp_path, puzzle_file, capsys):
    output = tmp_path / "results"
    assert main(["benchmark", str(tmp_path), "--no-progress", "--output", str(output)]) == 0
    assert "Recursive:" in capsys.readouterr().out
    assert (output / "benchmark_results.json").exists()


class TestExamplesCommand:
    """Tests for `kenken examples`."""

    def test_prints_json(self, capsys):
        assert main(["examples", "--size", "3"]) == 0
        out = capsys.readouterr().out
        assert "--- 3x3 (9 cages) ---" in out
        assert '"size": 3' in out

    def test_writes_files_for_benchmark(self, tmp_path, capsys):
        out_dir = tmp_path / "puzzles"
        assert main(["examples", "--output", str(out_dir)]) == 0
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "3x3.json", "4x4.json", "5x5.json", "6x6.json"
        ]
        assert Puzzle.load(str(out_dir / "4x4.json")).size == 4

    def test_unknown_size(self, capsys):
        assert main(["examples", "--size", "12"]) == 1
        assert "No example puzzle" in capsys.readouterr().out


def test_no_command(capsys):
    assert main([]) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
