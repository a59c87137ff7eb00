"""Tests for result payloads and engine options."""

import pytest
from pydantic import ValidationError

from gridalgo.grid import CellState, Grid
from gridalgo.schemas import (
    AlgoPoint,
    AlgorithmResult,
    EngineOptions,
    GomokuOptions,
    GridData,
    MazeOptions,
    MoveData,
    PathData,
)


def test_algo_point_is_column_first_and_hashable():
    point = AlgoPoint.at(row=2, col=5)

    assert point.col == 5
    assert point.row == 2
    assert point.to_coord() == (2, 5)
    assert point == AlgoPoint(col=5, row=2)
    assert len({point, AlgoPoint(col=5, row=2)}) == 1

    with pytest.raises(ValidationError):
        point.col = 1


def test_result_accessors_enforce_payload_kind():
    path = AlgorithmResult.ok(PathData(points=[AlgoPoint(col=0, row=0), AlgoPoint(col=1, row=0)]))
    move = AlgorithmResult.ok(MoveData(point=AlgoPoint(col=3, row=4)))
    grid = AlgorithmResult.ok(GridData.from_grid(Grid.filled(2, 2, CellState.BLACK)))

    assert path.as_path()[-1] == AlgoPoint(col=1, row=0)
    assert path.data.moves == 1
    assert move.as_move() == AlgoPoint(col=3, row=4)
    assert grid.as_grid().count(CellState.BLACK) == 4

    with pytest.raises(TypeError):
        path.as_move()
    with pytest.raises(TypeError):
        move.as_grid()
    with pytest.raises(TypeError):
        AlgorithmResult.fail("no path").as_path()


def test_failure_result_shape():
    result = AlgorithmResult.fail("board full")
    assert result.success is False
    assert result.data is None
    assert result.message == "board full"


def test_payload_discriminated_by_kind():
    result = AlgorithmResult.model_validate(
        {"success": True, "data": {"kind": "move", "point": {"col": 1, "row": 2}}}
    )
    assert isinstance(result.data, MoveData)

    result = AlgorithmResult.model_validate(
        {"success": True, "data": {"kind": "grid", "cells": [[0, 1], [1, 0]]}}
    )
    assert isinstance(result.data, GridData)
    assert result.as_grid().get(0, 1) is CellState.BLACK


def test_grid_data_rejects_ragged_cells():
    with pytest.raises(ValidationError):
        GridData(cells=((0, 1), (1,)))


def test_gomoku_options_defaults_and_aliases():
    assert GomokuOptions.from_context(None).turn is CellState.BLACK
    assert GomokuOptions.from_context({}).opponent is CellState.RED
    assert GomokuOptions.from_context({"turn": 2}).turn is CellState.RED
    assert GomokuOptions.from_context({"gomoku_turn": CellState.RED}).turn is CellState.RED
    assert GomokuOptions.from_context({"turn": "red"}).opponent is CellState.BLACK
    # Keys meant for other engines are ignored
    assert GomokuOptions.from_context({"seed": 3}).turn is CellState.BLACK


@pytest.mark.parametrize("turn", [CellState.BLUE, CellState.EMPTY, "GREEN"])
def test_gomoku_options_reject_non_player_colours(turn):
    with pytest.raises(ValidationError):
        GomokuOptions.from_context({"turn": turn})


def test_options_from_other_model():
    options = GomokuOptions(turn=CellState.RED)
    assert GomokuOptions.from_context(options) is options
    assert MazeOptions.from_context(options).seed is None
    assert MazeOptions.from_context({"seed": 11}).seed == 11
    assert isinstance(EngineOptions.from_context(None), EngineOptions)
