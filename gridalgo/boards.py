"""
Board fixtures from text and JSON files.

Camera sampling is the usual source of grids. Boards let demos and tests
describe the same grids by hand, either as text:

    R . . #
    . # . .
    . . . R

or as named JSON files in a boards directory:

```json
{
  "name": "wall_gap",
  "description": "Row 4 walled except the last column",
  "algorithm": "PATH_ASTAR",
  "rows": ["R........", "..."],
  "options": {"turn": "RED"}
}
```

``rows`` accepts either text lines (symbols below) or lists of integers.

Usage:
    loader = BoardLoader()
    board = loader.load("wall_gap")
    result = create_engine(board.algorithm).run(board.grid, board.options)
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .config import Config
from .grid import CellState, Grid, MalformedGridError

BOARD_SYMBOLS: Dict[str, CellState] = {
    ".": CellState.EMPTY,
    "0": CellState.EMPTY,
    "#": CellState.BLACK,
    "B": CellState.BLACK,
    "1": CellState.BLACK,
    "R": CellState.RED,
    "2": CellState.RED,
    "U": CellState.BLUE,
    "3": CellState.BLUE,
}

REQUIRED_FIELDS = ("name", "rows")


def parse_row(line: str, row_index: int = 0) -> List[CellState]:
    """Parse one text row. Whitespace between symbols is ignored."""

    cells: List[CellState] = []
    for symbol in line:
        if symbol.isspace():
            continue
        state = BOARD_SYMBOLS.get(symbol.upper())
        if state is None:
            raise MalformedGridError(f"Unknown board symbol {symbol!r} in row {row_index}")
        cells.append(state)
    return cells


def parse_board(text: str) -> Grid:
    """Parse a multi-line board; blank lines are skipped."""

    rows = [
        parse_row(line, index)
        for index, line in enumerate(line for line in text.splitlines() if line.strip())
    ]
    return Grid.from_rows(rows)


@dataclass
class BoardSpec:
    """A named board and, optionally, the algorithm it was prepared for."""

    name: str
    grid: Grid
    description: str = ""
    algorithm: Optional[str] = None  # AlgoType code or display label
    options: Dict[str, Any] = field(default_factory=dict)  # context passed to run()


class BoardLoader:
    """Load board fixtures from ``{boards_dir}/{name}.json``.

    Defaults to ``Config.BOARDS_DIR`` (``examples/boards`` unless
    ``GRIDALGO_BOARDS_DIR`` is set). Raises ``FileNotFoundError`` for missing
    files and ``ValueError`` for boards without a name or rows.
    """

    def __init__(self, boards_dir: Optional[Path] = None):
        self.boards_dir = boards_dir or Config.BOARDS_DIR

    def available(self) -> List[str]:
        return sorted(path.stem for path in self.boards_dir.glob("*.json"))

    def load(self, board_name: str) -> BoardSpec:
        board_path = self.boards_dir / f"{board_name}.json"
        if not board_path.exists():
            raise FileNotFoundError(f"Board not found: {board_path}")

        with open(board_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        self._validate_board(data, board_path)

        return BoardSpec(
            name=data["name"],
            description=data.get("description", ""),
            algorithm=data.get("algorithm"),
            grid=self._parse_rows(data["rows"]),
            options=data.get("options") or {},
        )

    def _validate_board(self, data: Dict[str, Any], board_path: Path) -> None:
        missing = [key for key in REQUIRED_FIELDS if key not in data]
        if missing:
            raise ValueError(f"Board {board_path.name} missing required fields: {', '.join(missing)}")
        if not isinstance(data["rows"], list) or not data["rows"]:
            raise ValueError(f"Board {board_path.name} must define at least one row")

    def _parse_rows(self, rows: List[Union[str, List[int]]]) -> Grid:
        parsed = [
            parse_row(row, index) if isinstance(row, str) else row
            for index, row in enumerate(rows)
        ]
        return Grid.from_rows(parsed)


def load_board(board_name: str, boards_dir: Optional[Path] = None) -> BoardSpec:
    """Convenience wrapper around ``BoardLoader.load``."""

    return BoardLoader(boards_dir).load(board_name)
