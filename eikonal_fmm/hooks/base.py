"""
Base Hooks System for the Fast Marching Engine

Hooks observe a run without subclassing the engine. They replace compiled-in
debug drawing: absent by default, no-op unless configured.
"""

from __future__ import annotations

from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eikonal_fmm.types import Coordinate, MarchingState
    from eikonal_fmm.utils.solver_result import MarchingResult


class MarchingHooks(ABC):
    """
    Base class for fast marching observer hooks.

    Override any method to observe the run. All methods are optional. Hooks
    must not mutate engine state; reading it (distances, states, the trial
    set) is fine.

    Example:
        class PrintHook(MarchingHooks):
            def on_cell_frozen(self, state):
                print(f"{state.coords} -> {state.distance:.3f}")

        engine = FastMarching(cost, hooks=PrintHook())
    """

    def on_run_start(self, initial_state: MarchingState) -> None:
        """
        Called once when run() starts, after seeding.

        Args:
            initial_state: Snapshot with ``coords=None`` and the initial trial set size
        """

    def on_cell_frozen(self, state: MarchingState) -> str | None:
        """
        Called once per cell moving ``TRIAL -> ALIVE``, after its neighbours were updated.

        This is the point between two extractions where all engine state is
        consistent, so it is also where a run can be cancelled.

        Args:
            state: Snapshot of the frozen cell

        Returns:
            None to continue, "stop" to end the run after this cell
        """

    def on_stale_entry(self, coords: Coordinate, distance: float) -> None:
        """Called when an extracted entry refers to a cell that is already ``ALIVE``."""

    def on_run_end(self, result: MarchingResult) -> MarchingResult:
        """
        Called once when run() returns.

        Args:
            result: Snapshot of the final fields and run statistics

        Returns:
            Potentially annotated result object
        """
        return result
