"""Adapters from engine results to things a UI or the AI chat can consume.

The UI layer draws one of three overlays depending on the payload kind: a
polyline through cell centres (paths), a single highlighted cell (moves), or
a replacement board (grids). ``OverlayAdapter`` produces those primitives in
screen space from the four board corners; ``AsciiRenderer`` gives the same
picture as text for logs and prompts.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Optional, Sequence, Tuple, TypeVar

from pydantic import BaseModel, Field

from .grid import CellState, Grid
from .schemas import AlgoPoint, AlgorithmResult, GridData, MoveData, PathData

RenderT = TypeVar("RenderT")
ScreenPoint = Tuple[float, float]


class ResultRenderer(ABC, Generic[RenderT]):
    """Turns an ``AlgorithmResult`` into a drawable representation."""

    @abstractmethod
    def render(self, result: AlgorithmResult, grid: Grid) -> RenderT:
        """Render ``result`` on top of the ``grid`` the engine was run with."""


# ============================================================================
# Text rendering
# ============================================================================

_DEFAULT_CELL_SYMBOLS: Dict[str, str] = {
    "EMPTY": ". ",
    "BLACK": "██",
    "RED": "R ",
    "BLUE": "U ",
    "path": "* ",
    "move": "◎ ",
}


class AsciiRenderer(ResultRenderer[str]):
    """Render the board as text with the result drawn over it.

    Path waypoints that are not RED markers show as ``*``; a suggested move
    shows as ``◎``; grid payloads replace the board. Failed results render the
    untouched board. Missing symbols fall back to ``??``.
    """

    def __init__(self, symbols: Optional[Dict[str, str]] = None):
        self.symbols = {**_DEFAULT_CELL_SYMBOLS}
        if symbols:
            self.symbols.update(symbols)

    def _symbol(self, key: str) -> str:
        return self.symbols.get(key, "??")

    def render(self, result: AlgorithmResult, grid: Grid) -> str:
        board = grid
        marks: Dict[Tuple[int, int], str] = {}

        if result.success and isinstance(result.data, GridData):
            board = result.data.grid
        elif result.success and isinstance(result.data, PathData):
            for point in result.data.points:
                if grid.get(point.row, point.col) != CellState.RED:
                    marks[point.to_coord()] = self._symbol("path")
        elif result.success and isinstance(result.data, MoveData):
            marks[result.data.point.to_coord()] = self._symbol("move")

        lines: List[str] = []
        for r in range(board.rows):
            row_chars: List[str] = []
            for c in range(board.cols):
                row_chars.append(marks.get((r, c)) or self._symbol(board.get(r, c).name))
            lines.append("".join(row_chars).rstrip())
        return "\n".join(lines)


# ============================================================================
# Screen overlay
# ============================================================================


class Overlay(BaseModel):
    """Screen-space primitives for the camera overlay. At most one field is set."""

    path: Optional[List[ScreenPoint]] = Field(None, description="Polyline through cell centres")
    highlight: Optional[ScreenPoint] = Field(None, description="Centre of the suggested cell")
    matrix: Optional[List[List[int]]] = Field(None, description="Replacement board to draw")

    @property
    def is_empty(self) -> bool:
        return self.path is None and self.highlight is None and self.matrix is None


class OverlayAdapter(ResultRenderer[Overlay]):
    """Map results onto the board quadrilateral seen by the camera.

    Args:
        corners: Board corners in screen space, ordered top-left, top-right,
            bottom-right, bottom-left.
        rows, cols: Board dimensions (9x9 on the printed board).
    """

    def __init__(self, corners: Sequence[ScreenPoint], rows: int, cols: int):
        if len(corners) != 4:
            raise ValueError(f"Expected 4 board corners, got {len(corners)}")
        if rows < 1 or cols < 1:
            raise ValueError(f"Board dimensions must be positive, got {rows}x{cols}")
        self.corners = [(float(x), float(y)) for x, y in corners]
        self.rows = rows
        self.cols = cols

    def interpolate(self, tx: float, ty: float) -> ScreenPoint:
        """Bilinear interpolation inside the corner quadrilateral (0..1 on each axis)."""

        (x1, y1), (x2, y2), (x3, y3), (x4, y4) = self.corners
        top_x = x1 + (x2 - x1) * tx
        top_y = y1 + (y2 - y1) * tx
        bottom_x = x4 + (x3 - x4) * tx
        bottom_y = y4 + (y3 - y4) * tx
        return top_x + (bottom_x - top_x) * ty, top_y + (bottom_y - top_y) * ty

    def cell_center(self, point: AlgoPoint) -> ScreenPoint:
        return self.interpolate((point.col + 0.5) / self.cols, (point.row + 0.5) / self.rows)

    def render(self, result: AlgorithmResult, grid: Grid) -> Overlay:
        if not result.success or result.data is None:
            return Overlay()
        if isinstance(result.data, PathData):
            return Overlay(path=[self.cell_center(p) for p in result.data.points])
        if isinstance(result.data, MoveData):
            return Overlay(highlight=self.cell_center(result.data.point))
        return Overlay(matrix=result.data.grid.to_lists())


# ============================================================================
# AI chat sync text
# ============================================================================


def format_grid_text(grid: Grid) -> str:
    """Integer matrix, one comma-separated row per line."""

    return "\n".join(",".join(str(value) for value in row) for row in grid.to_lists())


def build_sync_prompt(event: str, algo_label: str, grid: Grid) -> str:
    """Status message sent to the AI chat when the board changes."""

    return f"物理更新: {event} | 算法: {algo_label}\n当前矩阵:\n{format_grid_text(grid)}"
