"""
Internal State Representations

Cell states driven by the fast marching engine and the snapshot handed to
observer hooks.
"""

from __future__ import annotations

from enum import IntEnum
from typing import NamedTuple

from .arrays import Coordinate


class CellState(IntEnum):
    """
    Per-cell state of the fast marching state machine.

    Cells only move ``FAR -> TRIAL -> ALIVE``. ``FORBIDDEN`` is set from the
    initial configuration and never left or entered afterwards.
    """

    ALIVE = 0
    TRIAL = 1
    FAR = 2
    FORBIDDEN = 3


class MarchingState(NamedTuple):
    """
    Snapshot passed to hooks each time a cell is frozen.

    Attributes:
        coords: Coordinate of the cell that just became ``ALIVE`` (None at run start)
        distance: Its final arrival time
        frozen_count: Number of cells frozen so far in this run (seeds excluded)
        trial_size: Number of cells left in the trial set
    """

    coords: Coordinate | None
    distance: float
    frozen_count: int
    trial_size: int

    def __str__(self) -> str:
        return (
            f"MarchingState(coords={self.coords}, distance={self.distance:.6g}, "
            f"frozen={self.frozen_count}, trial={self.trial_size})"
        )
