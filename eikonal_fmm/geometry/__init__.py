"""
Grid geometry helpers: neighbor topology, bounds checks and index conversion.
"""

from .neighbors import (
    axis_offsets,
    in_bounds,
    is_interior,
    iter_neighbors,
    neighbor_offsets,
    shift,
    to_coordinates,
    to_linear_index,
)

__all__ = [
    "axis_offsets",
    "in_bounds",
    "is_interior",
    "iter_neighbors",
    "neighbor_offsets",
    "shift",
    "to_coordinates",
    "to_linear_index",
]
