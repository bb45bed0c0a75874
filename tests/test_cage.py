"""Unit tests for operators, cages and puzzle (de)serialization."""

import json
import pytest
from kenken.core.cage import Operator, Cage, Puzzle


PUZZLE_DATA = {
    "size": 3,
    "cages": [
        {"cells": [[0, 0], [1, 0]], "target": 2, "op": "*"},
        {"cells": [[0, 1], [0, 2]], "target": 5, "op": "+"},
        {"cells": [[1, 1], [1, 2], [2, 2]], "target": 6, "op": "*"},
        {"cells": [[2, 0], [2, 1]], "target": 2, "op": "-"},
    ],
}


class TestOperator:
    """Tests for Operator parsing."""

    @pytest.mark.parametrize("symbol,expected", [
        ("+", Operator.ADD),
        ("-", Operator.SUBTRACT),
        ("−", Operator.SUBTRACT),
        ("*", Operator.MULTIPLY),
        ("×", Operator.MULTIPLY),
        ("x", Operator.MULTIPLY),
        ("/", Operator.DIVIDE),
        ("÷", Operator.DIVIDE),
        ("=", Operator.EQUAL),
    ])
    def test_parse(self, symbol, expected):
        assert Operator.parse(symbol) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Operator.parse("%")

    def test_binary_operators(self):
        assert Operator.SUBTRACT.is_binary
        assert Operator.DIVIDE.is_binary
        assert not Operator.ADD.is_binary


class TestCage:
    """Tests for Cage."""

    def test_normalizes_fields(self):
        cage = Cage([[0, 0], [0, 1]], "3", "+")
        assert cage.cells == ((0, 0), (0, 1))
        assert cage.target == 3
        assert cage.op is Operator.ADD
        assert len(cage) == 2

    def test_is_immutable(self):
        cage = Cage([(0, 0)], 1, "=")
        with pytest.raises(AttributeError):
            cage.target = 2

    def test_from_dict_missing_key(self):
        with pytest.raises(ValueError):
            Cage.from_dict({"cells": [[0, 0]], "target": 1})

    def test_from_dict_bad_cell(self):
        with pytest.raises(ValueError):
            Cage.from_dict({"cells": [[0, 0, 1]], "target": 1, "op": "="})

    @pytest.mark.parametrize("cells", [5, [1, 2], "ab", None, [[0, "a"]], [[0, None]]])
    def test_from_dict_malformed_cells(self, cells):
        with pytest.raises(ValueError):
            Cage.from_dict({"cells": cells, "target": 1, "op": "="})

    @pytest.mark.parametrize("target", [2.7, "2.7", None, True, [3]])
    def test_rejects_non_integer_target(self, target):
        with pytest.raises(ValueError):
            Cage.from_dict({"cells": [[0, 0]], "target": target, "op": "="})

    def test_integral_float_target_accepted(self):
        assert Cage([(0, 0)], 3.0, "=").target == 3

    def test_rejects_fractional_cell(self):
        with pytest.raises(ValueError):
            Cage([(0, 1.5)], 1, "=")

    def test_from_dict_not_an_object(self):
        with pytest.raises(ValueError):
            Cage.from_dict([[0, 0], 1, "="])


class TestPuzzle:
    """Tests for Puzzle."""

    def test_from_dict(self):
        puzzle = Puzzle.from_dict(PUZZLE_DATA)
        assert puzzle.size == 3
        assert puzzle.cell_count == 9
        assert len(puzzle.cages) == 4
        assert puzzle.cages[2].cells == ((1, 1), (1, 2), (2, 2))

    def test_to_dict_matches_wire_shape(self):
        puzzle = Puzzle.from_dict(PUZZLE_DATA)
        assert puzzle.to_dict() == PUZZLE_DATA

    def test_from_cages(self):
        puzzle = Puzzle.from_cages(2, [([(0, 0), (0, 1)], 3, "+"), ([(1, 0), (1, 1)], 1, "-")])
        assert puzzle.cages[1].op is Operator.SUBTRACT

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "puzzle.json"
        puzzle = Puzzle.from_dict(PUZZLE_DATA)
        puzzle.save(str(path))

        assert json.loads(path.read_text()) == PUZZLE_DATA
        assert Puzzle.load(str(path)) == puzzle

    def test_rejects_missing_size(self):
        with pytest.raises(ValueError):
            Puzzle.from_dict({"cages": []})

    @pytest.mark.parametrize("cages", [None, 5, {"cells": [[0, 0]]}])
    def test_rejects_malformed_cages(self, cages):
        with pytest.raises(ValueError):
            Puzzle.from_dict({"size": 2, "cages": cages})

    @pytest.mark.parametrize("size", [2.5, "two", None])
    def test_rejects_non_integer_size(self, size):
        with pytest.raises(ValueError):
            Puzzle.from_dict({"size": size, "cages": []})

    def test_rejects_non_object_cage_entry(self):
        with pytest.raises(ValueError):
            Puzzle.from_dict({"size": 2, "cages": [5]})

    def test_rejects_unknown_operator(self):
        data = {"size": 2, "cages": [{"cells": [[0, 0]], "target": 1, "op": "?"}]}
        with pytest.raises(ValueError):
            Puzzle.from_json(json.dumps(data))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
