"""
Hook Composition System

Utilities for combining hooks and adapting plain callables.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from .base import MarchingHooks

if TYPE_CHECKING:
    from eikonal_fmm.types import Coordinate, MarchingState
    from eikonal_fmm.utils.solver_result import MarchingResult


class CallbackHook(MarchingHooks):
    """
    Adapt a plain ``callback(coords, distance)`` to the hooks interface.

    The callback is invoked once per frozen cell. Its return value is passed
    on, so returning "stop" cancels the run.
    """

    def __init__(self, callback: Callable[[Coordinate, float], str | None]):
        self.callback = callback

    def on_cell_frozen(self, state: MarchingState) -> str | None:
        return self.callback(state.coords, state.distance)


class MultiHook(MarchingHooks):
    """
    Compose multiple hooks into one.

    Example:
        combined = MultiHook(FreezeOrderRecorder(), ProgressLoggingHook(every=1000))
        engine = FastMarching(cost, hooks=combined)
    """

    def __init__(self, *hooks: MarchingHooks):
        self.hooks = list(hooks)

    def add_hook(self, hook: MarchingHooks) -> None:
        """Add a hook to the composition."""
        self.hooks.append(hook)

    def remove_hook(self, hook: MarchingHooks) -> bool:
        """Remove a hook from the composition. Returns True if found and removed."""
        try:
            self.hooks.remove(hook)
            return True
        except ValueError:
            return False

    def on_run_start(self, initial_state: MarchingState) -> None:
        for hook in self.hooks:
            hook.on_run_start(initial_state)

    def on_cell_frozen(self, state: MarchingState) -> str | None:
        """
        Execute every hook; the first control request wins.

        All hooks see every cell even when an earlier one asks to stop.
        """
        control = None
        for hook in self.hooks:
            result = hook.on_cell_frozen(state)
            if result and control is None:
                control = result
        return control

    def on_stale_entry(self, coords: Coordinate, distance: float) -> None:
        for hook in self.hooks:
            hook.on_stale_entry(coords, distance)

    def on_run_end(self, result: MarchingResult) -> MarchingResult:
        for hook in self.hooks:
            result = hook.on_run_end(result)
        return result


class ConditionalHook(MarchingHooks):
    """
    Forward frozen cells to ``hook`` only when ``condition(state)`` holds.

    Example:
        # Only record cells within distance 5
        near = ConditionalHook(FreezeOrderRecorder(), lambda state: state.distance <= 5.0)
    """

    def __init__(self, hook: MarchingHooks, condition: Callable[[MarchingState], bool]):
        self.hook = hook
        self.condition = condition

    def on_run_start(self, initial_state: MarchingState) -> None:
        self.hook.on_run_start(initial_state)

    def on_cell_frozen(self, state: MarchingState) -> str | None:
        if self.condition(state):
            return self.hook.on_cell_frozen(state)
        return None

    def on_stale_entry(self, coords: Coordinate, distance: float) -> None:
        self.hook.on_stale_entry(coords, distance)

    def on_run_end(self, result: MarchingResult) -> MarchingResult:
        return self.hook.on_run_end(result)


def as_hooks(hooks: MarchingHooks | Callable | None) -> MarchingHooks | None:
    """Normalize the ``hooks`` argument of the engine."""
    if hooks is None or isinstance(hooks, MarchingHooks):
        return hooks
    if callable(hooks):
        return CallbackHook(hooks)
    raise TypeError(f"hooks must be a MarchingHooks instance or a callable, got {type(hooks).__name__}")
