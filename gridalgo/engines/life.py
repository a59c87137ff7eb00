"""Conway's Game of Life over the board (BLACK = alive)."""

from __future__ import annotations

from gridalgo.grid import CellState, Grid
from gridalgo.schemas import AlgorithmResult, GridData

from .base import AlgoEngine, Context, GridInput

SURVIVE = frozenset({2, 3})
BIRTH = frozenset({3})


def alive_neighbors(grid: Grid, row: int, col: int) -> int:
    """Alive Moore neighbours; cells past the edge do not count."""

    return sum(1 for r, c in grid.neighbors8(row, col) if grid.get(r, c) == CellState.BLACK)


def life_step(grid: Grid) -> Grid:
    """Return the next generation. Dead cells come back as EMPTY."""

    next_rows = []
    for r in range(grid.rows):
        row = []
        for c in range(grid.cols):
            neighbors = alive_neighbors(grid, r, c)
            alive = grid.get(r, c) == CellState.BLACK
            rule = SURVIVE if alive else BIRTH
            row.append(CellState.BLACK if neighbors in rule else CellState.EMPTY)
        next_rows.append(tuple(row))
    return Grid(tuple(next_rows))


def step_generations(grid: Grid, generations: int) -> Grid:
    """Advance ``generations`` steps; zero returns the grid unchanged."""

    if generations < 0:
        raise ValueError(f"generations must be non-negative, got {generations}")
    for _ in range(generations):
        grid = life_step(grid)
    return grid


class GameOfLifeEngine(AlgoEngine):
    """Single B3/S23 step without wraparound. Always succeeds with ``GridData``."""

    def run(self, grid: GridInput, context: Context = None) -> AlgorithmResult:
        board = Grid.coerce(grid)
        return AlgorithmResult.ok(GridData.from_grid(life_step(board)))
