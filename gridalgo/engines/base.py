"""
AlgoEngine interface shared by every grid algorithm.

An engine is a stateless strategy: it receives a fully populated grid plus an
optional context and returns an ``AlgorithmResult``. Engines are swapped by
the selector without callers changing anything else.

Contract:
- Expected failures (no start marker, board full, unreachable goal) come back
  as ``AlgorithmResult.fail(message)``; they are never raised.
- Malformed input (empty or ragged grid, unknown cell values, a grid too small
  for the engine) raises ``MalformedGridError``.
- The input grid is never mutated. Engines return new grids or values.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence, Union

from gridalgo.grid import Grid
from gridalgo.schemas import AlgorithmResult, EngineOptions

GridInput = Union[Grid, Sequence[Sequence[Any]]]
Context = Optional[Union[EngineOptions, Mapping[str, Any]]]


class AlgoEngine(ABC):
    """Abstract base class for grid algorithms."""

    #: Options model used to validate the context passed to ``run``.
    options_model: type[EngineOptions] = EngineOptions

    @abstractmethod
    def run(self, grid: GridInput, context: Context = None) -> AlgorithmResult:
        """Run the algorithm once over ``grid``.

        Args:
            grid: ``Grid`` or raw nested rows of ints / ``CellState`` values.
            context: Optional options model or legacy mapping. Missing values
                fall back to the defaults documented on ``options_model``.

        Returns:
            ``AlgorithmResult`` whose payload kind is fixed per engine.

        Raises:
            MalformedGridError: If the grid is not a usable rectangle.
        """

    def options(self, context: Context) -> EngineOptions:
        """Validate ``context`` into this engine's options model."""
        return self.options_model.from_context(context)

    @property
    def name(self) -> str:
        return type(self).__name__
