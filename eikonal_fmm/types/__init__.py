"""Type definitions for eikonal_fmm."""

from .arrays import (
    NO_PREDECESSOR,
    Coordinate,
    CostField,
    DistanceField,
    Offset,
    PredecessorField,
    StateField,
)
from .state import CellState, MarchingState

__all__ = [
    "NO_PREDECESSOR",
    "CellState",
    "Coordinate",
    "CostField",
    "DistanceField",
    "MarchingState",
    "Offset",
    "PredecessorField",
    "StateField",
]
