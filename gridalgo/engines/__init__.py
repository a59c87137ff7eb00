"""Grid algorithm engines.

Every engine implements ``AlgoEngine.run(grid, context) -> AlgorithmResult``.
"""

from .base import AlgoEngine, Context, GridInput
from .astar import AStarEngine, astar_path
from .gomoku import GomokuEngine, score_cell
from .life import GameOfLifeEngine, life_step, step_generations
from .maze_gen import MazeGenEngine, carve_maze
from .maze_solve import BfsMazeSolver, DfsMazeSolver, bfs_path, dfs_path, maze_endpoints

__all__ = [
    "AlgoEngine",
    "Context",
    "GridInput",
    "AStarEngine",
    "astar_path",
    "GomokuEngine",
    "score_cell",
    "GameOfLifeEngine",
    "life_step",
    "step_generations",
    "MazeGenEngine",
    "carve_maze",
    "BfsMazeSolver",
    "DfsMazeSolver",
    "bfs_path",
    "dfs_path",
    "maze_endpoints",
]
