"""
Caller-side control loop for the vision board.

Ties the pieces together the way the camera screen drives them:
1. The user picks an algorithm (``select``)
2. A grid is sampled from the current frame and run through the engine (``step``)
3. The grid worth reporting to the AI chat is remembered (``last_synced``):
   the engine's new grid for automaton/maze output, otherwise the input grid
4. Later frames are compared against it (``has_changed``) so the chat only
   hears about real board changes

No I/O happens here. Chat delivery belongs to the caller, which reads
``last_prompt`` or registers a step listener.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .engines import AlgoEngine, Context, GridInput
from .grid import Grid
from .logging_utils import log_deterministic, log_error, log_info, log_success
from .rendering import build_sync_prompt
from .schemas import AlgorithmResult, GridData
from .selector import AlgoType, Identifier, create_engine, resolve_algo_type

UNSUPPORTED_ALGORITHM = "unsupported algorithm"

StepListener = Callable[[AlgoType, Grid, AlgorithmResult], None]


class AlgorithmSession:
    """Holds the selected engine and the last board state reported to the chat.

    Args:
        algorithm: Optional identifier to select immediately.
        step_listeners: Callables invoked after every successful step with
            ``(algo_type, input_grid, result)``.
    """

    def __init__(
        self,
        algorithm: Optional[Identifier] = None,
        step_listeners: Optional[List[StepListener]] = None,
    ):
        self.algo_type: Optional[AlgoType] = None
        self.engine: Optional[AlgoEngine] = None
        self.last_synced: Optional[Grid] = None
        self.last_prompt: Optional[str] = None
        self.step_listeners = step_listeners or []
        if algorithm is not None:
            self.select(algorithm)

    def select(self, identifier: Identifier) -> bool:
        """Switch algorithm. Unknown identifiers clear the selection and return False."""

        algo_type = resolve_algo_type(identifier)
        self.algo_type = algo_type
        self.engine = create_engine(algo_type) if algo_type is not None else None
        if self.engine is None:
            log_error(f"[Selector] {UNSUPPORTED_ALGORITHM}: {identifier!r}")
            return False
        log_info(f"[Selector] Algorithm set to {algo_type.label} ({algo_type.value})")
        return True

    def step(self, grid: GridInput, context: Context = None) -> AlgorithmResult:
        """Run the selected engine once and record the grid to sync."""

        if self.engine is None or self.algo_type is None:
            log_error(f"[Engine] {UNSUPPORTED_ALGORITHM}: no engine selected")
            return AlgorithmResult.fail(UNSUPPORTED_ALGORITHM)

        board = Grid.coerce(grid)
        log_deterministic(
            f"[Engine] Running {self.engine.name} on {board.rows}x{board.cols} grid..."
        )
        result = self.engine.run(board, context)

        if not result.success:
            log_error(f"[Engine] {self.engine.name} failed: {result.message}")
            return result

        if isinstance(result.data, GridData):
            synced = result.data.grid
            event = "算法演算生成了新状态"
        else:
            synced = board
            event = f"运行了 {self.algo_type.label}"
        self.last_synced = synced
        self.last_prompt = build_sync_prompt(event, self.algo_type.label, synced)
        log_success(f"[Engine] {self.engine.name} produced {result.data.kind} result")

        for listener in self.step_listeners:
            try:
                listener(self.algo_type, board, result)
            except Exception as exc:  # pragma: no cover - diagnostic hook
                log_error(f"[Session] Listener failed: {exc}")

        return result

    def has_changed(self, grid: GridInput) -> bool:
        """True when ``grid`` differs from the last synced board (or none was synced)."""

        return self.last_synced is None or Grid.coerce(grid) != self.last_synced

    def observe(self, grid: GridInput) -> bool:
        """Record a sampled board if it changed; returns whether a sync is due."""

        board = Grid.coerce(grid)
        if not self.has_changed(board):
            return False
        label = self.algo_type.label if self.algo_type is not None else "-"
        self.last_synced = board
        self.last_prompt = build_sync_prompt("检测到物理状态变化", label, board)
        log_info("[Session] Board change detected")
        return True
