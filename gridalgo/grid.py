"""Grid and cell model shared by every engine.

A grid is the sampled state of the physical board: a rectangular matrix of
``CellState`` values. Rows and columns are zero-indexed and addressed as
``(row, col)`` internally. Engines expose points as ``(col, row)`` through
``AlgoPoint`` (see ``schemas.py``) because that is what the overlay expects.

Grids are immutable. Engines build new grids with ``with_cells`` or
``filled`` instead of editing the input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Sequence, Tuple

from .config import Config


class MalformedGridError(ValueError):
    """Raised when a grid is empty, ragged, or holds unknown cell values."""


class CellState(IntEnum):
    """Closed set of cell states sampled from the board.

    Numeric values match the integer matrix text sent to the AI chat.
    """

    EMPTY = 0
    BLACK = 1  # obstacle / black stone / alive cell / maze wall
    RED = 2    # start-goal marker / red stone
    BLUE = 3


Coord = Tuple[int, int]

_ORTHOGONAL: Tuple[Coord, ...] = ((0, 1), (0, -1), (1, 0), (-1, 0))
_MOORE: Tuple[Coord, ...] = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)


def _coerce_cell(value: object, row: int, col: int) -> CellState:
    if isinstance(value, CellState):
        return value
    try:
        return CellState(value)
    except ValueError:
        raise MalformedGridError(
            f"Unknown cell value {value!r} at (row={row}, col={col})"
        ) from None


@dataclass(frozen=True)
class Grid:
    """Immutable rectangular matrix of cell states."""

    cells: Tuple[Tuple[CellState, ...], ...]

    def __post_init__(self) -> None:
        if not self.cells or not self.cells[0]:
            raise MalformedGridError("Grid must have at least one row and one column")
        width = len(self.cells[0])
        for index, row in enumerate(self.cells):
            if len(row) != width:
                raise MalformedGridError(
                    f"Grid is not rectangular: row {index} has {len(row)} cells, expected {width}"
                )

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[object]]) -> "Grid":
        """Build a grid from nested rows of ints or ``CellState`` values."""

        return cls(
            tuple(
                tuple(_coerce_cell(value, r, c) for c, value in enumerate(row))
                for r, row in enumerate(rows)
            )
        )

    @classmethod
    def filled(cls, rows: int, cols: int, state: CellState = CellState.EMPTY) -> "Grid":
        if rows < 1 or cols < 1:
            raise MalformedGridError(f"Grid dimensions must be positive (got {rows}x{cols})")
        return cls(tuple(tuple(state for _ in range(cols)) for _ in range(rows)))

    @classmethod
    def blank(cls, size: int | None = None) -> "Grid":
        """Empty square board, ``Config.GRID_SIZE`` cells a side unless ``size`` is given."""

        if size is None:
            size = Config.GRID_SIZE
        return cls.filled(size, size)

    @classmethod
    def coerce(cls, grid: "Grid | Sequence[Sequence[object]]") -> "Grid":
        """Accept either a ``Grid`` or raw nested rows."""

        if isinstance(grid, Grid):
            return grid
        return cls.from_rows(grid)

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0])

    @property
    def shape(self) -> Coord:
        return self.rows, self.cols

    def get(self, row: int, col: int) -> CellState:
        return self.cells[row][col]

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def iter_cells(self) -> Iterator[Tuple[int, int, CellState]]:
        """Yield ``(row, col, state)`` in row-major order."""

        for r, row in enumerate(self.cells):
            for c, state in enumerate(row):
                yield r, c, state

    def cells_of(self, state: CellState) -> List[Coord]:
        """Return every ``(row, col)`` holding ``state``, in row-major order."""

        return [(r, c) for r, c, value in self.iter_cells() if value == state]

    def count(self, state: CellState) -> int:
        return sum(row.count(state) for row in self.cells)

    def neighbors4(self, row: int, col: int) -> Iterator[Coord]:
        """In-bounds orthogonal neighbours (right, left, down, up)."""

        for dr, dc in _ORTHOGONAL:
            nr, nc = row + dr, col + dc
            if self.in_bounds(nr, nc):
                yield nr, nc

    def neighbors8(self, row: int, col: int) -> Iterator[Coord]:
        """In-bounds Moore neighbours; no wraparound."""

        for dr, dc in _MOORE:
            nr, nc = row + dr, col + dc
            if self.in_bounds(nr, nc):
                yield nr, nc

    def with_cells(self, updates: dict[Coord, CellState]) -> "Grid":
        """Return a copy with the given ``(row, col) -> state`` updates applied."""

        rows = [list(row) for row in self.cells]
        for (r, c), state in updates.items():
            if not self.in_bounds(r, c):
                raise MalformedGridError(f"Update outside grid bounds: (row={r}, col={c})")
            rows[r][c] = CellState(state)
        return Grid.from_rows(rows)

    def to_lists(self) -> List[List[int]]:
        """Plain integer matrix, suitable for JSON or the AI sync text."""

        return [[int(state) for state in row] for row in self.cells]
