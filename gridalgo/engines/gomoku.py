"""One-ply five-in-a-row move suggester.

Every empty cell is scored by the runs of stones it would touch. For each of
the four line directions the contiguous stones on both sides of the cell are
counted, once for the engine's colour and once for the opponent's:

    score = sum(10 * own_run + 8 * opponent_run for each direction)

Blocking the opponent is weighted slightly below extending an own line. There
is no lookahead; the highest score wins and ties keep the first cell in
row-major order, so an empty board always answers (0, 0).
"""

from __future__ import annotations

from typing import Optional

from gridalgo.grid import CellState, Grid
from gridalgo.schemas import AlgoPoint, AlgorithmResult, GomokuOptions, MoveData

from .base import AlgoEngine, Context, GridInput

OWN_WEIGHT = 10
OPPONENT_WEIGHT = 8

# Horizontal, vertical, and both diagonals as (d_row, d_col).
LINE_DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))

BOARD_FULL = "board full"


def count_run(grid: Grid, row: int, col: int, d_row: int, d_col: int, piece: CellState) -> int:
    """Count ``piece`` stones contiguous to ``(row, col)`` along one line, both ways."""

    count = 0
    for sign in (1, -1):
        r, c = row + sign * d_row, col + sign * d_col
        while grid.in_bounds(r, c) and grid.get(r, c) == piece:
            count += 1
            r += sign * d_row
            c += sign * d_col
    return count


def score_cell(grid: Grid, row: int, col: int, ai: CellState, opponent: CellState) -> int:
    score = 0
    for d_row, d_col in LINE_DIRECTIONS:
        score += count_run(grid, row, col, d_row, d_col, ai) * OWN_WEIGHT
        score += count_run(grid, row, col, d_row, d_col, opponent) * OPPONENT_WEIGHT
    return score


class GomokuEngine(AlgoEngine):
    """Suggest the next stone for the colour named by ``GomokuOptions.turn``."""

    options_model = GomokuOptions

    def run(self, grid: GridInput, context: Context = None) -> AlgorithmResult:
        board = Grid.coerce(grid)
        options = self.options(context)

        best_score = -1
        best_move: Optional[AlgoPoint] = None
        for row, col in board.cells_of(CellState.EMPTY):
            score = score_cell(board, row, col, options.turn, options.opponent)
            if score > best_score:
                best_score = score
                best_move = AlgoPoint.at(row, col)

        if best_move is None:
            return AlgorithmResult.fail(BOARD_FULL)
        return AlgorithmResult.ok(MoveData(point=best_move))
