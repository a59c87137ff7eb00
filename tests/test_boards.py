"""Tests for board parsing and the JSON board loader."""

import json
from pathlib import Path

import pytest

from gridalgo.boards import BoardLoader, load_board, parse_board
from gridalgo.grid import CellState, MalformedGridError
from gridalgo.selector import create_engine

BOARDS_DIR = Path(__file__).resolve().parents[1] / "examples" / "boards"


def test_parse_board_symbols():
    grid = parse_board(
        """
        . # R U

        0 1 2 3
        B b r u
        """
    )
    assert grid.shape == (3, 4)
    assert grid.to_lists() == [[0, 1, 2, 3], [0, 1, 2, 3], [1, 1, 2, 3]]


def test_parse_board_rejects_unknown_symbols_and_ragged_rows():
    with pytest.raises(MalformedGridError):
        parse_board(". x .")
    with pytest.raises(MalformedGridError):
        parse_board(". .\n.")


def test_loader_reads_text_and_integer_rows(tmp_path):
    (tmp_path / "mixed.json").write_text(
        json.dumps(
            {
                "name": "mixed",
                "algorithm": "GOMOKU_AI",
                "rows": ["R.#", [0, 1, 2]],
                "options": {"turn": "RED"},
            }
        ),
        encoding="utf-8",
    )
    board = BoardLoader(tmp_path).load("mixed")

    assert board.name == "mixed"
    assert board.description == ""
    assert board.grid.get(0, 0) is CellState.RED
    assert board.grid.get(1, 2) is CellState.RED
    assert board.options == {"turn": "RED"}
    assert BoardLoader(tmp_path).available() == ["mixed"]


def test_loader_validates_required_fields(tmp_path):
    (tmp_path / "nameless.json").write_text(json.dumps({"rows": ["..."]}), encoding="utf-8")
    (tmp_path / "empty.json").write_text(json.dumps({"name": "empty", "rows": []}), encoding="utf-8")

    with pytest.raises(ValueError, match="name"):
        load_board("nameless", tmp_path)
    with pytest.raises(ValueError, match="at least one row"):
        load_board("empty", tmp_path)
    with pytest.raises(FileNotFoundError):
        load_board("missing", tmp_path)


@pytest.mark.parametrize("name", ["wall_gap", "gomoku_opening", "glider", "blank"])
def test_bundled_boards_run_successfully(name):
    board = load_board(name, BOARDS_DIR)
    engine = create_engine(board.algorithm)

    assert engine is not None
    result = engine.run(board.grid, board.options)
    assert result.success is True


def test_bundled_wall_gap_route_length():
    board = load_board("wall_gap", BOARDS_DIR)
    assert len(create_engine(board.algorithm).run(board.grid).as_path()) - 1 == 16
