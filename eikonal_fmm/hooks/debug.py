"""
Debugging and Analysis Hooks for the Fast Marching Engine

Ready-to-use hooks for recording, monitoring and bounding a run.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

import numpy as np

from eikonal_fmm.utils.fmm_logging import get_logger

from .base import MarchingHooks

if TYPE_CHECKING:
    from eikonal_fmm.types import Coordinate, MarchingState
    from eikonal_fmm.utils.solver_result import MarchingResult

logger = get_logger(__name__)


class FreezeOrderRecorder(MarchingHooks):
    """
    Record the order in which cells are frozen.

    Example:
        recorder = FreezeOrderRecorder()
        FastMarching(cost, hooks=recorder)  # ... seed and run
        assert recorder.is_non_decreasing()
    """

    def __init__(self) -> None:
        self.coords: list[Coordinate] = []
        self.distances: list[float] = []
        self.stale: list[tuple[Coordinate, float]] = []

    def on_run_start(self, initial_state: MarchingState) -> None:
        self.coords = []
        self.distances = []
        self.stale = []

    def on_cell_frozen(self, state: MarchingState) -> str | None:
        self.coords.append(state.coords)
        self.distances.append(state.distance)
        return None

    def on_stale_entry(self, coords: Coordinate, distance: float) -> None:
        self.stale.append((coords, distance))

    def is_non_decreasing(self, tolerance: float = 0.0) -> bool:
        """Whether frozen distances never decrease by more than ``tolerance``."""
        if len(self.distances) < 2:
            return True
        return bool(np.all(np.diff(np.asarray(self.distances)) >= -tolerance))

    def frozen_order(self, shape: tuple[int, ...]) -> np.ndarray:
        """Array of ``shape`` holding each cell's freeze rank, -1 where never frozen."""
        order = np.full(shape, -1, dtype=np.int64)
        for rank, coords in enumerate(self.coords):
            order[coords] = rank
        return order


class ProgressLoggingHook(MarchingHooks):
    """
    Log progress every ``every`` frozen cells.

    Example:
        engine = FastMarching(cost, hooks=ProgressLoggingHook(every=10_000))
    """

    def __init__(self, every: int = 1000, level: str = "INFO"):
        if every < 1:
            raise ValueError(f"every must be positive, got {every}")
        self.every = every
        self.level = level.upper()
        self.start_time: float | None = None

    def on_run_start(self, initial_state: MarchingState) -> None:
        self.start_time = time.perf_counter()
        logger.log(self._level(), f"Front starts with {initial_state.trial_size} trial cells")

    def on_cell_frozen(self, state: MarchingState) -> str | None:
        if state.frozen_count % self.every == 0:
            elapsed = time.perf_counter() - (self.start_time or time.perf_counter())
            logger.log(
                self._level(),
                f"Frozen {state.frozen_count:8d} cells - front at {state.distance:.6g}, "
                f"trial={state.trial_size}, elapsed={elapsed:.3f}s",
            )
        return None

    def on_run_end(self, result: MarchingResult) -> MarchingResult:
        logger.log(self._level(), f"Front exhausted after {result.frozen_count} cells")
        return result

    def _level(self) -> int:
        return getattr(logging, self.level)


class CellBudgetHook(MarchingHooks):
    """
    Cancel the run once ``max_cells`` cells have been frozen.

    Example:
        budget = CellBudgetHook(max_cells=500)
        engine = FastMarching(cost, hooks=budget)
        # ... seed and run
        assert budget.triggered
    """

    def __init__(self, max_cells: int):
        if max_cells < 1:
            raise ValueError(f"max_cells must be positive, got {max_cells}")
        self.max_cells = max_cells
        self.triggered = False

    def on_run_start(self, initial_state: MarchingState) -> None:
        self.triggered = False

    def on_cell_frozen(self, state: MarchingState) -> str | None:
        if state.frozen_count >= self.max_cells:
            self.triggered = True
            return "stop"
        return None
