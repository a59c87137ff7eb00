"""Breadth-first and depth-first maze solvers.

Endpoints follow the pathfinder convention when the board carries at least
two RED markers. Otherwise the solver runs between the first and the last
open (non-BLACK) cells in row-major order, which for a generated maze means
from (1, 1) to the bottom-right-most passage.
"""

from __future__ import annotations

from abc import abstractmethod
from collections import deque
from typing import Deque, Dict, List, Optional, Set, Tuple

from gridalgo.grid import CellState, Coord, Grid
from gridalgo.schemas import AlgorithmResult

from .base import AlgoEngine, Context, GridInput
from .paths import (
    NO_ENDPOINTS,
    NO_PATH,
    is_passable,
    reconstruct_path,
    red_endpoints,
    to_path_data,
)


def maze_endpoints(grid: Grid) -> Optional[Tuple[Coord, Coord]]:
    """RED markers if present, else the first and last open cells."""

    endpoints = red_endpoints(grid)
    if endpoints is not None:
        return endpoints
    open_cells = [(r, c) for r, c, state in grid.iter_cells() if state != CellState.BLACK]
    if len(open_cells) < 2:
        return None
    return open_cells[0], open_cells[-1]


def bfs_path(grid: Grid, start: Coord, goal: Coord) -> Optional[List[Coord]]:
    """Return a shortest 4-connected path avoiding BLACK, or None."""

    if start == goal:
        return [start]
    visited: Set[Coord] = {start}
    parents: Dict[Coord, Coord] = {}
    queue: Deque[Coord] = deque([start])

    while queue:
        current = queue.popleft()
        for neighbor in grid.neighbors4(*current):
            if neighbor in visited or not is_passable(grid, neighbor):
                continue
            visited.add(neighbor)
            parents[neighbor] = current
            if neighbor == goal:
                return reconstruct_path(parents, neighbor)
            queue.append(neighbor)
    return None


def dfs_path(grid: Grid, start: Coord, goal: Coord) -> Optional[List[Coord]]:
    """Return the first path found depth-first, or None.

    Neighbours are tried in the fixed grid order (right, left, down, up), so the
    result is deterministic but not necessarily shortest.
    """

    visited: Set[Coord] = {start}
    path: List[Coord] = [start]
    frontier = [iter(list(grid.neighbors4(*start)))]

    while frontier:
        if path[-1] == goal:
            return path
        advanced = False
        for neighbor in frontier[-1]:
            if neighbor in visited or not is_passable(grid, neighbor):
                continue
            visited.add(neighbor)
            path.append(neighbor)
            frontier.append(iter(list(grid.neighbors4(*neighbor))))
            advanced = True
            break
        if not advanced:
            frontier.pop()
            path.pop()
    return None


class _MazeSolver(AlgoEngine):
    @abstractmethod
    def _search(self, grid: Grid, start: Coord, goal: Coord) -> Optional[List[Coord]]:
        """Return the route from start to goal, or None."""

    def run(self, grid: GridInput, context: Context = None) -> AlgorithmResult:
        board = Grid.coerce(grid)
        endpoints = maze_endpoints(board)
        if endpoints is None:
            return AlgorithmResult.fail(NO_ENDPOINTS)
        path = self._search(board, *endpoints)
        if path is None:
            return AlgorithmResult.fail(NO_PATH)
        return AlgorithmResult.ok(to_path_data(path))


class BfsMazeSolver(_MazeSolver):
    """Shortest route through the maze. Produces ``PathData``."""

    def _search(self, grid: Grid, start: Coord, goal: Coord) -> Optional[List[Coord]]:
        return bfs_path(grid, start, goal)


class DfsMazeSolver(_MazeSolver):
    """First route found by depth-first search. Produces ``PathData``."""

    def _search(self, grid: Grid, start: Coord, goal: Coord) -> Optional[List[Coord]]:
        return dfs_path(grid, start, goal)
