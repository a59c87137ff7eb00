"""Helpers shared by the path-producing engines (A*, BFS, DFS)."""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from gridalgo.grid import CellState, Coord, Grid
from gridalgo.schemas import AlgoPoint, PathData

NO_ENDPOINTS = "no start/goal"
NO_PATH = "no path"


def red_endpoints(grid: Grid) -> Optional[Tuple[Coord, Coord]]:
    """Return ``(start, goal)`` from the RED markers, or None if fewer than two.

    The first RED cell in row-major order is the start. Every later RED cell is
    a goal candidate, and only the first candidate is targeted.
    """

    markers = grid.cells_of(CellState.RED)
    if len(markers) < 2:
        return None
    return markers[0], markers[1]


def is_passable(grid: Grid, coord: Coord) -> bool:
    return grid.get(*coord) != CellState.BLACK


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reconstruct_path(parents: Dict[Coord, Coord], end: Coord) -> List[Coord]:
    """Walk parent links back from ``end`` and return the path start-first."""

    path = [end]
    while path[-1] in parents:
        path.append(parents[path[-1]])
    path.reverse()
    return path


def to_path_data(path: List[Coord]) -> PathData:
    """Convert internal ``(row, col)`` coordinates to column-first points."""

    return PathData(points=[AlgoPoint.at(r, c) for r, c in path])
