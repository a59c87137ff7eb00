"""
gridalgo - interchangeable algorithms over a sampled board grid.

A camera frame is sampled into a small grid of cell states; an engine chosen
by identifier turns it into a path, a move, or a new grid.

No camera, network, or storage dependencies. The caller supplies grids and
decides what to do with results.
"""

__version__ = "0.1.0"

from .config import Config

# Grid model
from .grid import CellState, Grid, MalformedGridError

# Result and option schemas
from .schemas import (
    AlgoPoint,
    AlgorithmResult,
    PathData,
    MoveData,
    GridData,
    EngineOptions,
    GomokuOptions,
    MazeOptions,
)

# Engines
from .engines import (
    AlgoEngine,
    AStarEngine,
    GomokuEngine,
    GameOfLifeEngine,
    MazeGenEngine,
    BfsMazeSolver,
    DfsMazeSolver,
)

# Selection and control flow
from .selector import AlgoType, create_engine, resolve_algo_type, display_labels, result_kind
from .session import AlgorithmSession

# Adapters and fixtures
from .rendering import (
    ResultRenderer,
    AsciiRenderer,
    Overlay,
    OverlayAdapter,
    format_grid_text,
    build_sync_prompt,
)
from .boards import BoardLoader, BoardSpec, parse_board, load_board

__all__ = [
    "Config",
    # Grid model
    "CellState",
    "Grid",
    "MalformedGridError",
    # Schemas
    "AlgoPoint",
    "AlgorithmResult",
    "PathData",
    "MoveData",
    "GridData",
    "EngineOptions",
    "GomokuOptions",
    "MazeOptions",
    # Engines
    "AlgoEngine",
    "AStarEngine",
    "GomokuEngine",
    "GameOfLifeEngine",
    "MazeGenEngine",
    "BfsMazeSolver",
    "DfsMazeSolver",
    # Selection
    "AlgoType",
    "create_engine",
    "resolve_algo_type",
    "display_labels",
    "result_kind",
    "AlgorithmSession",
    # Adapters
    "ResultRenderer",
    "AsciiRenderer",
    "Overlay",
    "OverlayAdapter",
    "format_grid_text",
    "build_sync_prompt",
    # Boards
    "BoardLoader",
    "BoardSpec",
    "parse_board",
    "load_board",
]
