"""Tests for result adapters and chat sync text."""

import pytest

from gridalgo.boards import parse_board
from gridalgo.engines import AStarEngine, GameOfLifeEngine, GomokuEngine
from gridalgo.grid import CellState, Grid
from gridalgo.rendering import (
    AsciiRenderer,
    OverlayAdapter,
    build_sync_prompt,
    format_grid_text,
)
from gridalgo.schemas import AlgoPoint, AlgorithmResult

UNIT_SQUARE = [(0, 0), (1, 0), (1, 1), (0, 1)]


def test_ascii_renders_path_between_markers():
    grid = parse_board("R . R\n# # #")
    text = AsciiRenderer().render(AStarEngine().run(grid), grid)

    assert text.splitlines() == ["R * R", "██████"]


def test_ascii_renders_move_and_grid():
    grid = Grid.filled(1, 2)
    assert AsciiRenderer().render(GomokuEngine().run(grid), grid) == "◎ ."

    blinker = parse_board(". . .\n# # #\n. . .")
    text = AsciiRenderer(symbols={"EMPTY": "_ ", "BLACK": "X "}).render(
        GameOfLifeEngine().run(blinker), blinker
    )
    assert text.splitlines() == ["_ X _", "_ X _", "_ X _"]


def test_ascii_failed_result_shows_board_and_unknown_symbols():
    grid = parse_board("U .")
    renderer = AsciiRenderer()
    del renderer.symbols["BLUE"]
    assert renderer.render(AlgorithmResult.fail("no path"), grid) == "??."


def test_overlay_maps_cell_centres():
    adapter = OverlayAdapter(UNIT_SQUARE, rows=1, cols=1)
    assert adapter.cell_center(AlgoPoint(col=0, row=0)) == pytest.approx((0.5, 0.5))

    adapter = OverlayAdapter([(100, 100), (190, 100), (190, 190), (100, 190)], rows=9, cols=9)
    assert adapter.cell_center(AlgoPoint(col=0, row=0)) == pytest.approx((105.0, 105.0))
    assert adapter.cell_center(AlgoPoint(col=8, row=4)) == pytest.approx((185.0, 145.0))


def test_overlay_handles_skewed_quadrilateral():
    adapter = OverlayAdapter([(0, 0), (4, 0), (6, 2), (2, 2)], rows=2, cols=2)
    x, y = adapter.interpolate(0.5, 0.5)
    assert (x, y) == pytest.approx((3.0, 1.0))


def test_overlay_sets_one_primitive_per_payload():
    grid = parse_board("R . R")
    adapter = OverlayAdapter(UNIT_SQUARE, rows=1, cols=3)

    path_overlay = adapter.render(AStarEngine().run(grid), grid)
    assert len(path_overlay.path) == 3
    assert path_overlay.highlight is None and path_overlay.matrix is None

    move_overlay = adapter.render(GomokuEngine().run(grid), grid)
    assert move_overlay.highlight == pytest.approx((0.5, 0.5))
    assert move_overlay.path is None

    life_overlay = adapter.render(GameOfLifeEngine().run(grid), grid)
    assert life_overlay.matrix == [[0, 0, 0]]

    assert adapter.render(AlgorithmResult.fail("no path"), grid).is_empty


def test_overlay_validates_inputs():
    with pytest.raises(ValueError):
        OverlayAdapter([(0, 0), (1, 0), (1, 1)], rows=9, cols=9)
    with pytest.raises(ValueError):
        OverlayAdapter(UNIT_SQUARE, rows=0, cols=9)


def test_sync_text_uses_integer_matrix():
    grid = Grid.from_rows([[0, 1], [2, 3]])
    assert format_grid_text(grid) == "0,1\n2,3"

    prompt = build_sync_prompt("运行了 生命游戏", "生命游戏", grid)
    assert prompt.startswith("物理更新: 运行了 生命游戏 | 算法: 生命游戏\n")
    assert prompt.endswith("当前矩阵:\n0,1\n2,3")
    assert CellState.BLUE.value == 3
