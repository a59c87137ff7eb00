"""
Pydantic schemas for engine results and engine options.

Results carry a tagged payload so consumers can tell a path from a move or a
grid without knowing which engine ran:

- ``PathData``: ordered waypoints (A*, BFS and DFS solvers)
- ``MoveData``: a single suggested move (five-in-a-row engine)
- ``GridData``: a full replacement grid (Game of Life, maze generator)

Options replace the loosely-typed context bag. Each engine validates the
context it receives through its own options model, so a plain dict such as
``{"turn": 2}`` keeps working while typos in values fail loudly.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Mapping, Optional, Tuple, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from .config import Config
from .grid import CellState, Grid


# ============================================================================
# Points and payloads
# ============================================================================


class AlgoPoint(BaseModel):
    """Board coordinate exposed to the overlay, column first."""

    model_config = ConfigDict(frozen=True)

    col: int = Field(..., description="Zero-based column index")
    row: int = Field(..., description="Zero-based row index")

    @classmethod
    def at(cls, row: int, col: int) -> "AlgoPoint":
        """Build a point from the internal ``(row, col)`` order."""
        return cls(col=col, row=row)

    def to_coord(self) -> Tuple[int, int]:
        """Return the internal ``(row, col)`` order."""
        return self.row, self.col


class PathData(BaseModel):
    """Waypoints from start to goal inclusive."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["path"] = "path"
    points: List[AlgoPoint] = Field(default_factory=list)

    @property
    def moves(self) -> int:
        """Number of unit moves along the path."""
        return max(len(self.points) - 1, 0)


class MoveData(BaseModel):
    """A single suggested move."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["move"] = "move"
    point: AlgoPoint


class GridData(BaseModel):
    """A complete grid produced by an engine."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["grid"] = "grid"
    cells: Tuple[Tuple[CellState, ...], ...]

    @field_validator("cells")
    @classmethod
    def check_rectangular(cls, value: Tuple[Tuple[CellState, ...], ...]) -> Tuple[Tuple[CellState, ...], ...]:
        # Grid construction rejects empty or ragged matrices.
        Grid(value)
        return value

    @classmethod
    def from_grid(cls, grid: Grid) -> "GridData":
        return cls(cells=grid.cells)

    @property
    def grid(self) -> Grid:
        return Grid(self.cells)


ResultData = Annotated[Union[PathData, MoveData, GridData], Field(discriminator="kind")]


class AlgorithmResult(BaseModel):
    """Outcome of one engine run.

    ``message`` is a human-readable diagnostic populated on failure only. It
    is meant for display and logs, never for parsing.
    """

    model_config = ConfigDict(frozen=True)

    success: bool
    data: Optional[ResultData] = None
    message: str = ""

    @classmethod
    def ok(cls, data: Union[PathData, MoveData, GridData]) -> "AlgorithmResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, message: str) -> "AlgorithmResult":
        return cls(success=False, message=message)

    def _expect(self, kind: type) -> Any:
        if not self.success or not isinstance(self.data, kind):
            found = self.data.kind if self.data is not None else None
            raise TypeError(f"Expected {kind.__name__} payload, result holds {found!r}")
        return self.data

    def as_path(self) -> List[AlgoPoint]:
        """Return path waypoints, raising ``TypeError`` for any other payload."""
        return self._expect(PathData).points

    def as_move(self) -> AlgoPoint:
        """Return the suggested move, raising ``TypeError`` for any other payload."""
        return self._expect(MoveData).point

    def as_grid(self) -> Grid:
        """Return the produced grid, raising ``TypeError`` for any other payload."""
        return self._expect(GridData).grid


# ============================================================================
# Engine options
# ============================================================================


def _parse_cell_state(value: Any) -> Any:
    # Accept "BLACK"/"red" names from config files and JSON boards.
    if isinstance(value, str) and not value.isdigit():
        try:
            return CellState[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown cell state name {value!r}") from None
    if isinstance(value, str):
        return int(value)
    return value


class EngineOptions(BaseModel):
    """Base class for per-engine options.

    Unknown keys are ignored so one context mapping can be shared across
    engines (the session forwards whatever the caller passes).
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    @classmethod
    def from_context(cls, context: "EngineOptions | Mapping[str, Any] | None"):
        """Coerce ``None``, a mapping, or another options model into ``cls``."""

        if context is None:
            return cls()
        if isinstance(context, cls):
            return context
        if isinstance(context, BaseModel):
            context = context.model_dump()
        return cls.model_validate(dict(context))


def _default_turn() -> str:
    return Config.DEFAULT_TURN


class GomokuOptions(EngineOptions):
    """Options for the five-in-a-row move suggester."""

    turn: CellState = Field(
        default_factory=_default_turn,
        validate_default=True,
        validation_alias=AliasChoices("turn", "gomoku_turn"),
        description="Colour the engine plays for (BLACK or RED)",
    )

    @field_validator("turn", mode="before")
    @classmethod
    def parse_turn(cls, value: Any) -> Any:
        if value is None:
            value = _default_turn()
        return _parse_cell_state(value)

    @field_validator("turn")
    @classmethod
    def check_player_colour(cls, value: CellState) -> CellState:
        if value not in (CellState.BLACK, CellState.RED):
            raise ValueError(f"turn must be BLACK or RED, got {value.name}")
        return value

    @property
    def opponent(self) -> CellState:
        return CellState.RED if self.turn == CellState.BLACK else CellState.BLACK


class MazeOptions(EngineOptions):
    """Options for the maze generator."""

    seed: Optional[int] = Field(
        default_factory=lambda: Config.MAZE_SEED,
        description="Seed for reproducible mazes; None draws fresh randomness",
    )
