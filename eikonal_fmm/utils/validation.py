"""
Reachability analysis for fast marching runs.

Predicts which cells a run will freeze: seeds plus every non-forbidden
interior cell connected to a seed through the full 3^N neighbourhood.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from scipy import ndimage

from .exceptions import validate_coordinate

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from numpy.typing import NDArray


def interior_mask(shape: Sequence[int], margin: int) -> NDArray[np.bool_]:
    """Cells at least ``margin`` away from every grid face."""
    mask = np.zeros(tuple(shape), dtype=bool)
    mask[tuple(slice(margin, n - margin) for n in shape)] = True
    return mask


def reachable_region(
    passable: NDArray[np.bool_],
    seeds: Iterable[Sequence[int]],
    margin: int = 1,
) -> NDArray[np.bool_]:
    """
    Cells that a fast marching run from ``seeds`` will mark ``ALIVE``.

    Args:
        passable: True for cells that are not Forbidden
        seeds: Seed coordinates
        margin: Engine margin; cells in the border band are never visited

    Returns:
        Boolean mask of the grid's shape
    """
    passable = np.asarray(passable, dtype=bool)
    shape = passable.shape
    seed_coords = [validate_coordinate(seed, shape, solver_name="reachable_region") for seed in seeds]

    region = passable & interior_mask(shape, margin)
    for seed in seed_coords:
        region[seed] = True

    # Full (3^N - 1)-neighbourhood connectivity
    structure = np.ones((3,) * passable.ndim, dtype=bool)
    labeled, _ = ndimage.label(region, structure=structure)

    seed_labels = {int(labeled[seed]) for seed in seed_coords}
    seed_labels.discard(0)
    if not seed_labels:
        return np.zeros(shape, dtype=bool)

    return np.isin(labeled, sorted(seed_labels))
