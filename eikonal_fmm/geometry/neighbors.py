"""
Neighbor topology for N-dimensional structured grids.

The full neighborhood of a cell is every offset in the closed cube
{-1, 0, 1}^N except the origin, i.e. 3^N - 1 cells (8 in 2D, 26 in 3D).
Offsets are generated once per dimension and shared read-only by every
engine working in that dimension.
"""

from __future__ import annotations

import itertools
from functools import lru_cache
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from eikonal_fmm.types import Coordinate, Offset


@lru_cache(maxsize=None)
def neighbor_offsets(dimension: int) -> tuple[Offset, ...]:
    """
    Offsets of the full (3^N - 1)-cell neighborhood.

    Order is lexicographic over {-1, 0, 1}^N and stable across calls.

    Args:
        dimension: Number of grid axes N (>= 1)

    Returns:
        Tuple of 3^N - 1 offset tuples

    Raises:
        ValueError: If dimension < 1

    Examples:
        >>> neighbor_offsets(1)
        ((-1,), (1,))
        >>> len(neighbor_offsets(3))
        26
    """
    if dimension < 1:
        raise ValueError(f"Dimension must be positive, got {dimension}")

    origin = (0,) * dimension
    return tuple(delta for delta in itertools.product((-1, 0, 1), repeat=dimension) if delta != origin)


@lru_cache(maxsize=None)
def axis_offsets(dimension: int) -> tuple[tuple[Offset, Offset], ...]:
    """Pairs ``(-e_i, +e_i)`` of unit offsets, one pair per axis."""
    if dimension < 1:
        raise ValueError(f"Dimension must be positive, got {dimension}")

    pairs = []
    for axis in range(dimension):
        minus = tuple(-1 if i == axis else 0 for i in range(dimension))
        plus = tuple(1 if i == axis else 0 for i in range(dimension))
        pairs.append((minus, plus))
    return tuple(pairs)


def shift(coords: Coordinate, delta: Offset) -> Coordinate:
    """Return ``coords + delta``."""
    return tuple(c + d for c, d in zip(coords, delta, strict=True))


def in_bounds(coords: Sequence[int], shape: Sequence[int]) -> bool:
    """Whether ``coords`` indexes a cell of a grid with ``shape``."""
    return all(0 <= c < n for c, n in zip(coords, shape, strict=True))


def is_interior(coords: Sequence[int], shape: Sequence[int], margin: int) -> bool:
    """Whether ``coords`` lies at least ``margin`` cells away from every grid face."""
    return all(margin <= c < n - margin for c, n in zip(coords, shape, strict=True))


def iter_neighbors(
    coords: Coordinate,
    shape: Sequence[int],
    margin: int,
    offsets: Sequence[Offset] | None = None,
) -> Iterator[Coordinate]:
    """
    Yield the neighbors of ``coords`` that fall inside the margin-reduced grid.

    Args:
        coords: Center cell
        shape: Grid shape
        margin: Width of the border band that is never visited
        offsets: Neighborhood to use (default: full neighborhood for ``len(shape)``)
    """
    if offsets is None:
        offsets = neighbor_offsets(len(shape))

    for delta in offsets:
        n = shift(coords, delta)
        if is_interior(n, shape, margin):
            yield n


def to_linear_index(coords: Sequence[int], shape: Sequence[int]) -> int:
    """C-order linear index of ``coords`` (inverse of :func:`to_coordinates`)."""
    return int(np.ravel_multi_index(tuple(coords), tuple(shape)))


def to_coordinates(index: int, shape: Sequence[int]) -> Coordinate:
    """Coordinate of the C-order linear ``index``."""
    return tuple(int(c) for c in np.unravel_index(int(index), tuple(shape)))
