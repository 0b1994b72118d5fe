"""
Array and coordinate type aliases used across eikonal_fmm.

The grid is a plain NumPy array in C order; coordinates are tuples of ints
in array-index order.
"""

from __future__ import annotations

from typing import TypeAlias

import numpy as np
from numpy.typing import NDArray

Coordinate: TypeAlias = tuple[int, ...]
"""Grid cell coordinate, one signed integer per axis."""

Offset: TypeAlias = tuple[int, ...]
"""Relative offset between two cells, each component in {-1, 0, 1}."""

CostField: TypeAlias = NDArray[np.floating]
"""Per-cell traversal cost ("speed" or "displacement"). Read-only for the engine."""

DistanceField: TypeAlias = NDArray[np.floating]
"""Per-cell arrival time. Unreached cells hold the sentinel maximum."""

StateField: TypeAlias = NDArray[np.uint8]
"""Per-cell ``CellState`` values."""

PredecessorField: TypeAlias = NDArray[np.int64]
"""Per-cell linear index of the cell the distance was propagated from (-1 if none)."""

NO_PREDECESSOR: int = -1
