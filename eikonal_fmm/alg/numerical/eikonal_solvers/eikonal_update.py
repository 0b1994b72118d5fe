"""
First-order upwind update for the Eikonal equation |grad u| = 1 / f.

Mathematical Background:
    For a cell x on a unit grid, let u_i be the smaller of the two axis
    neighbours along axis i and s = 1 / f(x). The upwind discretization

        sum_i (r - u_i)^2 = s^2

    is the quadratic

        N r^2 - 2 (sum u_i) r + (sum u_i^2 - s^2) = 0

    with reduced discriminant

        delta = (sum u_i)^2 - N (sum u_i^2 - s^2).

    For delta >= 0 the larger root (sum u_i + sqrt(delta)) / N is taken. For
    delta < 0 no multi-axis solution exists and the update falls back to the
    1-D update from the smallest neighbour: min_i u_i + s.

References:
    - Sethian (1996): A fast marching level set method for monotonically
      advancing fronts
    - Sethian (1999): Level Set Methods and Fast Marching Methods, Ch. 8
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from eikonal_fmm.geometry.neighbors import axis_offsets, in_bounds, shift

if TYPE_CHECKING:
    from collections.abc import Sequence

    from eikonal_fmm.types import Coordinate, DistanceField


def distance_sentinel(distances: DistanceField) -> float:
    """The "not yet known" value of a distance field: the dtype's maximum."""
    return float(np.finfo(distances.dtype).max)


def upwind_minima(
    coords: Coordinate,
    distances: DistanceField,
    sentinel: float | None = None,
) -> list[float]:
    """
    Smaller of the two axis neighbours of ``coords``, one value per axis.

    Neighbours outside the grid count as unreached and contribute ``sentinel``.
    """
    if sentinel is None:
        sentinel = distance_sentinel(distances)

    shape = distances.shape
    us = []
    for minus, plus in axis_offsets(distances.ndim):
        u = sentinel
        for delta in (minus, plus):
            n = shift(coords, delta)
            if in_bounds(n, shape):
                u = min(u, float(distances[n]))
        us.append(u)
    return us


def solve_quadratic_update(us: Sequence[float], fx: float, sentinel: float) -> float:
    """
    Solve the local upwind quadratic for given axis minima ``us`` and cost ``fx``.

    An axis without any reached neighbour (value ``sentinel``) makes the
    N-axis discriminant undefined, which sends the update down the 1-D
    fallback branch. If no axis is reached at all, ``sentinel`` is returned.

    Raises:
        ZeroDivisionError: If ``fx == 0``
    """
    dim = len(us)
    fx_inverse = 1.0 / fx
    umin = min(us)

    if umin >= sentinel:
        return sentinel

    if all(u < sentinel for u in us):
        usum = math.fsum(us)
        usq = math.fsum(u * u for u in us)

        # Reduced discriminant of the trinome
        delta = usum * usum - dim * (usq - fx_inverse * fx_inverse)
        if delta >= 0:
            return (usum + math.sqrt(delta)) / dim

    return umin + fx_inverse


def solve_eikonal_equation(
    coords: Coordinate,
    fx: float,
    distances: DistanceField,
    sentinel: float | None = None,
) -> float:
    """
    Candidate arrival time of ``coords`` from its current axis neighbours.

    No bounds or cost checks are done here: callers guarantee ``fx != 0``
    (cells with invalid cost are marked Forbidden) and compare the result
    against the cell's current distance.

    Args:
        coords: Cell to update
        fx: Cost-field value at ``coords``
        distances: Current distance field
        sentinel: Unreached marker (default: ``finfo(distances.dtype).max``)

    Returns:
        Candidate distance, or ``sentinel`` if no neighbour has been reached

    Example:
        >>> d = np.full((3, 3), np.finfo(np.float64).max)
        >>> d[0, 1] = 0.0
        >>> solve_eikonal_equation((1, 1), 1.0, d)
        1.0
    """
    if sentinel is None:
        sentinel = distance_sentinel(distances)

    us = upwind_minima(coords, distances, sentinel)
    return solve_quadratic_update(us, float(fx), sentinel)
