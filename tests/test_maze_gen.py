"""Tests for the recursive-backtracker maze generator."""

import random
from collections import deque

import pytest

from gridalgo.engines import MazeGenEngine, carve_maze
from gridalgo.grid import CellState, Grid, MalformedGridError
from gridalgo.schemas import GridData, MazeOptions


def _reachable_from(grid: Grid, start):
    seen = {start}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for nb in grid.neighbors4(*cell):
            if nb not in seen and grid.get(*nb) is CellState.EMPTY:
                seen.add(nb)
                queue.append(nb)
    return seen


def _border(grid: Grid):
    for r in range(grid.rows):
        for c in range(grid.cols):
            if r in (0, grid.rows - 1) or c in (0, grid.cols - 1):
                yield grid.get(r, c)


def test_maze_is_connected_with_intact_border():
    result = MazeGenEngine().run(Grid.filled(9, 9), {"seed": 1})

    assert result.success is True
    assert isinstance(result.data, GridData)
    maze = result.as_grid()
    assert maze.shape == (9, 9)
    assert all(state is CellState.BLACK for state in _border(maze))
    assert maze.get(1, 1) is CellState.EMPTY

    passages = set(maze.cells_of(CellState.EMPTY))
    assert _reachable_from(maze, (1, 1)) == passages
    assert maze.count(CellState.EMPTY) + maze.count(CellState.BLACK) == 81


@pytest.mark.parametrize("seed", range(10))
def test_maze_is_perfect(seed):
    maze = carve_maze(9, 9, random.Random(seed))
    passages = maze.cells_of(CellState.EMPTY)

    # 16 lattice cells joined by 15 carved walls
    assert len(passages) == 31
    assert all(maze.get(r, c) is CellState.EMPTY for r in (1, 3, 5, 7) for c in (1, 3, 5, 7))

    # A tree has exactly one fewer adjacency than it has cells
    edges = sum(
        1
        for r, c in passages
        for nr, nc in ((r + 1, c), (r, c + 1))
        if maze.in_bounds(nr, nc) and maze.get(nr, nc) is CellState.EMPTY
    )
    assert edges == len(passages) - 1


def test_same_seed_same_maze():
    grid = Grid.filled(11, 11)
    first = MazeGenEngine().run(grid, MazeOptions(seed=99)).as_grid()
    second = MazeGenEngine().run(grid, {"seed": 99}).as_grid()
    injected = MazeGenEngine(rng=random.Random(99)).run(grid).as_grid()

    assert first == second == injected


def test_different_seeds_usually_differ():
    grid = Grid.filled(11, 11)
    mazes = {MazeGenEngine().run(grid, {"seed": seed}).as_grid() for seed in range(5)}
    assert len(mazes) > 1


def test_input_contents_are_ignored():
    busy = Grid.filled(7, 7, CellState.RED)
    maze = MazeGenEngine().run(busy, {"seed": 4}).as_grid()

    assert maze == MazeGenEngine().run(Grid.filled(7, 7), {"seed": 4}).as_grid()
    assert maze.count(CellState.RED) == 0


def test_even_dimensions_leave_last_interior_line_as_wall():
    maze = carve_maze(8, 10, random.Random(5))

    assert maze.shape == (8, 10)
    assert all(maze.get(6, c) is CellState.BLACK for c in range(10))
    assert all(maze.get(r, 8) is CellState.BLACK for r in range(8))
    passages = set(maze.cells_of(CellState.EMPTY))
    assert _reachable_from(maze, (1, 1)) == passages


def test_minimum_size_maze():
    maze = carve_maze(3, 3, random.Random(0))
    assert maze.cells_of(CellState.EMPTY) == [(1, 1)]


@pytest.mark.parametrize("shape", [(2, 2), (1, 9), (9, 2)])
def test_too_small_grid_raises(shape):
    with pytest.raises(MalformedGridError):
        MazeGenEngine().run(Grid.filled(*shape), {"seed": 0})


def test_large_maze_does_not_hit_recursion_limit():
    maze = carve_maze(121, 121, random.Random(2))
    assert len(maze.cells_of(CellState.EMPTY)) == 2 * 60 * 60 - 1
