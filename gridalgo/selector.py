"""Engine selection by algorithm identifier.

Identifiers form a closed set: each ``AlgoType`` has a stable code (the enum
value) and the display label shown in the algorithm picker. Anything else
resolves to None and no engine is created; callers decide how to report it.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Literal, Optional, Union

from .engines import (
    AlgoEngine,
    AStarEngine,
    BfsMazeSolver,
    DfsMazeSolver,
    GameOfLifeEngine,
    GomokuEngine,
    MazeGenEngine,
)


class AlgoType(str, Enum):
    """Algorithms offered on the vision board."""

    PATH_ASTAR = "PATH_ASTAR"
    GOMOKU_AI = "GOMOKU_AI"
    GAME_OF_LIFE = "GAME_OF_LIFE"
    MAZE_GEN_PRIMS = "MAZE_GEN_PRIMS"
    MAZE_SOLVE_BFS = "MAZE_SOLVE_BFS"
    MAZE_SOLVE_DFS = "MAZE_SOLVE_DFS"

    @property
    def label(self) -> str:
        return ALGO_LABELS[self]


ALGO_LABELS: Dict[AlgoType, str] = {
    AlgoType.PATH_ASTAR: "A*路径搜索",
    AlgoType.GOMOKU_AI: "五子棋AI",
    AlgoType.GAME_OF_LIFE: "生命游戏",
    AlgoType.MAZE_GEN_PRIMS: "迷宫生成",
    AlgoType.MAZE_SOLVE_BFS: "BFS迷宫求解",
    AlgoType.MAZE_SOLVE_DFS: "DFS迷宫求解",
}

_ENGINE_FACTORIES: Dict[AlgoType, Callable[[], AlgoEngine]] = {
    AlgoType.PATH_ASTAR: AStarEngine,
    AlgoType.GOMOKU_AI: GomokuEngine,
    AlgoType.GAME_OF_LIFE: GameOfLifeEngine,
    AlgoType.MAZE_GEN_PRIMS: MazeGenEngine,
    AlgoType.MAZE_SOLVE_BFS: BfsMazeSolver,
    AlgoType.MAZE_SOLVE_DFS: DfsMazeSolver,
}

ResultKind = Literal["path", "move", "grid"]

_RESULT_KINDS: Dict[AlgoType, ResultKind] = {
    AlgoType.PATH_ASTAR: "path",
    AlgoType.GOMOKU_AI: "move",
    AlgoType.GAME_OF_LIFE: "grid",
    AlgoType.MAZE_GEN_PRIMS: "grid",
    AlgoType.MAZE_SOLVE_BFS: "path",
    AlgoType.MAZE_SOLVE_DFS: "path",
}

_BY_LABEL: Dict[str, AlgoType] = {label: algo for algo, label in ALGO_LABELS.items()}

Identifier = Union[AlgoType, str]


def resolve_algo_type(identifier: Identifier) -> Optional[AlgoType]:
    """Map a code, display label, or ``AlgoType`` to ``AlgoType``; None if unknown."""

    if isinstance(identifier, AlgoType):
        return identifier
    if not isinstance(identifier, str):
        return None
    if identifier in _BY_LABEL:
        return _BY_LABEL[identifier]
    try:
        return AlgoType(identifier)
    except ValueError:
        return None


def create_engine(identifier: Identifier) -> Optional[AlgoEngine]:
    """Return a fresh engine for ``identifier``, or None when it is not recognised."""

    algo_type = resolve_algo_type(identifier)
    if algo_type is None:
        return None
    return _ENGINE_FACTORIES[algo_type]()


def result_kind(identifier: Identifier) -> Optional[ResultKind]:
    """Payload kind an engine produces (``"path"``, ``"move"`` or ``"grid"``)."""

    algo_type = resolve_algo_type(identifier)
    if algo_type is None:
        return None
    return _RESULT_KINDS[algo_type]


def display_labels() -> List[str]:
    """Labels for the algorithm picker, in menu order."""

    return [ALGO_LABELS[algo] for algo in AlgoType]
