"""
Result object for fast marching runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from eikonal_fmm.types import CellState

from .paths import backtrack_path

if TYPE_CHECKING:
    from collections.abc import Sequence

    from eikonal_fmm.types import Coordinate, DistanceField, PredecessorField, StateField


@dataclass
class MarchingResult:
    """
    Snapshot of a fast marching run.

    Attributes:
        distances: Arrival times; unreached cells hold the dtype's maximum
        states: Final ``CellState`` of every cell
        predecessors: Linear index of each cell's upwind source (-1 if none)
        frozen_count: Cells moved ``TRIAL -> ALIVE`` (seeds excluded)
        stale_extractions: Extracted entries whose cell was already ``ALIVE``
        stopped_early: Whether the run ended before the trial set was empty
        limit: Distance limit carried by the engine
        execution_time: Wall time of run() in seconds
        solver_name: Name of the engine that produced the result
        metadata: Additional information (margin, dimension, ...)
    """

    distances: DistanceField
    states: StateField
    predecessors: PredecessorField
    frozen_count: int = 0
    stale_extractions: int = 0
    stopped_early: bool = False
    limit: float = float(np.finfo(np.float64).max)
    execution_time: float | None = None
    solver_name: str = "FastMarching"
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate result data after initialization."""
        if self.distances.shape != self.states.shape or self.distances.shape != self.predecessors.shape:
            raise ValueError(
                "distances, states and predecessors must share a shape: "
                f"{self.distances.shape}, {self.states.shape}, {self.predecessors.shape}"
            )

    @property
    def shape(self) -> tuple[int, ...]:
        return self.distances.shape

    @property
    def sentinel(self) -> float:
        """Value marking unreached cells in ``distances``."""
        return float(np.finfo(self.distances.dtype).max)

    @property
    def reached_mask(self) -> np.ndarray:
        """Cells in state ``ALIVE``."""
        return self.states == CellState.ALIVE

    def finite_distances(self) -> np.ndarray:
        """Distances as float64 with unreached cells set to ``inf``."""
        out = self.distances.astype(np.float64)
        out[self.distances == self.distances.dtype.type(self.sentinel)] = np.inf
        return out

    def within_limit(self) -> np.ndarray:
        """Cells whose distance does not exceed ``limit``."""
        return self.finite_distances() <= self.limit

    def path_to(self, target: Sequence[int]) -> list[Coordinate]:
        """Cells from ``target`` back to its seed, following predecessors."""
        return backtrack_path(self.predecessors, target)

    def summary(self) -> dict[str, Any]:
        """Counts per state plus run statistics."""
        counts = {state.name.lower(): int(np.count_nonzero(self.states == state)) for state in CellState}
        finite = self.finite_distances()
        reached = np.isfinite(finite)
        return {
            **counts,
            "frozen_count": self.frozen_count,
            "stale_extractions": self.stale_extractions,
            "stopped_early": self.stopped_early,
            "max_distance": float(finite[reached].max()) if reached.any() else None,
            "execution_time": self.execution_time,
        }
