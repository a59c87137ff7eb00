"""A* pathfinding between the RED markers of a board."""

from __future__ import annotations

import heapq
import itertools
import math
from typing import Dict, List, Optional, Tuple

from gridalgo.grid import Coord, Grid
from gridalgo.schemas import AlgorithmResult

from .base import AlgoEngine, Context, GridInput
from .paths import (
    NO_ENDPOINTS,
    NO_PATH,
    is_passable,
    manhattan,
    reconstruct_path,
    red_endpoints,
    to_path_data,
)


def astar_path(grid: Grid, start: Coord, goal: Coord) -> Optional[List[Coord]]:
    """Return a shortest 4-connected path of ``(row, col)`` cells avoiding BLACK.

    Unit edge cost with a Manhattan heuristic. A cell is pushed again whenever
    a strictly better cost is found, including cells already expanded; stale
    heap entries are skipped when popped. Returns None if ``goal`` is
    unreachable.
    """

    g_score: Dict[Coord, int] = {start: 0}
    parents: Dict[Coord, Coord] = {}
    # Counter keeps heap entries comparable when f ties.
    counter = itertools.count()
    open_heap: List[Tuple[int, int, int, Coord]] = [(manhattan(start, goal), next(counter), 0, start)]

    while open_heap:
        _, _, g, current = heapq.heappop(open_heap)
        if g > g_score.get(current, math.inf):
            continue
        if current == goal:
            return reconstruct_path(parents, current)

        for neighbor in grid.neighbors4(*current):
            if not is_passable(grid, neighbor):
                continue
            tentative = g + 1
            if tentative < g_score.get(neighbor, math.inf):
                g_score[neighbor] = tentative
                parents[neighbor] = current
                f = tentative + manhattan(neighbor, goal)
                heapq.heappush(open_heap, (f, next(counter), tentative, neighbor))

    return None


class AStarEngine(AlgoEngine):
    """Shortest path from the first RED cell to the second RED cell.

    BLACK cells are walls; every other state, unused RED markers included, is
    walkable. Produces ``PathData``.
    """

    def run(self, grid: GridInput, context: Context = None) -> AlgorithmResult:
        board = Grid.coerce(grid)
        endpoints = red_endpoints(board)
        if endpoints is None:
            return AlgorithmResult.fail(NO_ENDPOINTS)

        start, goal = endpoints
        path = astar_path(board, start, goal)
        if path is None:
            return AlgorithmResult.fail(NO_PATH)
        return AlgorithmResult.ok(to_path_data(path))
