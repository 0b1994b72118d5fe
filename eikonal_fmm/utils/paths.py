"""
Path reconstruction from a predecessor field.

Each reached cell stores the linear index of the neighbour its distance was
propagated from; following those links leads back to a seed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from eikonal_fmm.geometry.neighbors import to_coordinates
from eikonal_fmm.types import NO_PREDECESSOR

from .exceptions import MarchingError, validate_coordinate

if TYPE_CHECKING:
    from collections.abc import Sequence

    from eikonal_fmm.types import Coordinate, PredecessorField


def backtrack_path(predecessors: PredecessorField, target: Sequence[int]) -> list[Coordinate]:
    """
    Follow predecessor links from ``target`` back to a seed.

    Args:
        predecessors: Predecessor field (C-order linear indices, -1 for none)
        target: Cell to start from

    Returns:
        Coordinates from ``target`` (first) to the seed (last). A cell without
        predecessor gives a one-element path.

    Raises:
        SeedOutOfBoundsError: If ``target`` is outside the grid
        MarchingError: If the links form a cycle

    Example:
        >>> path = backtrack_path(result.predecessors, (0, 0))
        >>> path[-1] in seeds
        True
    """
    shape = predecessors.shape
    current = validate_coordinate(target, shape, solver_name="backtrack_path")
    flat = np.asarray(predecessors).reshape(-1)

    path = [current]
    seen = {current}
    index = int(predecessors[current])

    while index != NO_PREDECESSOR:
        current = to_coordinates(index, shape)
        if current in seen:
            raise MarchingError(
                f"Predecessor links from {path[0]} form a cycle at {current}",
                solver_name="backtrack_path",
                error_code="PREDECESSOR_CYCLE",
                diagnostic_data={"path_length": len(path)},
            )
        seen.add(current)
        path.append(current)
        index = int(flat[index])

    return path
