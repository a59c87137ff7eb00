"""Randomized recursive-backtracker maze generation.

The output grid has the input's dimensions. It starts as solid wall (BLACK)
and passages (EMPTY) are carved on the odd lattice starting at (1, 1): from
each cell the four two-step moves are shuffled, and every target that is
still wall and lies strictly inside the border ring gets the wall between
carved and is explored next. The result is a perfect maze (all passages
connected, no cycles) with the border intact.

On even dimensions the last interior row/column stays wall.
"""

from __future__ import annotations

import random
from typing import List, Optional

from gridalgo.grid import CellState, Coord, Grid, MalformedGridError
from gridalgo.schemas import AlgorithmResult, GridData, MazeOptions

from .base import AlgoEngine, Context, GridInput

MIN_SIZE = 3
STEPS = ((0, 2), (0, -2), (2, 0), (-2, 0))


def carve_maze(rows: int, cols: int, rng: random.Random) -> Grid:
    """Carve a maze of ``rows`` x ``cols`` using ``rng`` for every shuffle."""

    if rows < MIN_SIZE or cols < MIN_SIZE:
        raise MalformedGridError(
            f"Maze generation needs at least {MIN_SIZE}x{MIN_SIZE} cells, got {rows}x{cols}"
        )

    maze: List[List[CellState]] = [[CellState.BLACK] * cols for _ in range(rows)]

    def interior(r: int, c: int) -> bool:
        return 1 <= r < rows - 1 and 1 <= c < cols - 1

    def shuffled_steps() -> List[Coord]:
        steps = list(STEPS)
        rng.shuffle(steps)
        return steps

    # Explicit stack of (cell, remaining shuffled steps); visits cells in the
    # same order as the recursive formulation.
    maze[1][1] = CellState.EMPTY
    stack = [((1, 1), shuffled_steps())]
    while stack:
        (r, c), steps = stack[-1]
        if not steps:
            stack.pop()
            continue
        dr, dc = steps.pop(0)
        nr, nc = r + dr, c + dc
        if interior(nr, nc) and maze[nr][nc] == CellState.BLACK:
            maze[r + dr // 2][c + dc // 2] = CellState.EMPTY
            maze[nr][nc] = CellState.EMPTY
            stack.append(((nr, nc), shuffled_steps()))

    return Grid.from_rows(maze)


class MazeGenEngine(AlgoEngine):
    """Generate a maze sized like the input grid; input cell values are ignored.

    Randomness comes from ``rng`` when injected, otherwise from a fresh
    ``random.Random`` seeded with ``MazeOptions.seed`` (``None`` for entropy).
    """

    options_model = MazeOptions

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng

    def run(self, grid: GridInput, context: Context = None) -> AlgorithmResult:
        board = Grid.coerce(grid)
        options = self.options(context)
        rng = self._rng if self._rng is not None else random.Random(options.seed)
        maze = carve_maze(board.rows, board.cols, rng)
        return AlgorithmResult.ok(GridData.from_grid(maze))
