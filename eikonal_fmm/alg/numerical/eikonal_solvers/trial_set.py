"""
Trial set (narrow band front) for the fast marching method.

A binary heap (``heapq``) keyed by ``(distance, coords)`` paired with a
coordinate -> entry map. Reprioritizing a coordinate invalidates its heap
entry in place and pushes a fresh one; invalidated entries are discarded
when they reach the top of the heap. At any time there is at most one live
entry per coordinate, so insert, extract-min and reprioritize are all
O(log n) amortized.
"""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from eikonal_fmm.types import Coordinate

# Heap entry layout: [distance, coords, live]
_DISTANCE = 0
_COORDS = 1
_LIVE = 2


class TrialSet:
    """
    Priority structure over ``(coords, distance)`` pairs with decrease-key.

    Ties on distance are broken by coordinate order, so extraction order is
    reproducible across runs.

    Example:
        >>> trial = TrialSet()
        >>> trial.insert((0, 1), 2.0)
        >>> trial.insert((1, 0), 1.5)
        >>> trial.reprioritize((0, 1), 2.0, 1.0)
        True
        >>> trial.extract_min()
        ((0, 1), 1.0)
    """

    def __init__(self) -> None:
        self._heap: list[list] = []
        self._entries: dict[Coordinate, list] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, coords: object) -> bool:
        return coords in self._entries

    def __repr__(self) -> str:
        return f"TrialSet(size={len(self)})"

    def insert(self, coords: Coordinate, distance: float) -> None:
        """
        Add a new entry.

        Raises:
            ValueError: If ``coords`` already has a live entry
        """
        if coords in self._entries:
            raise ValueError(f"{coords} is already in the trial set; use reprioritize()")

        entry = [float(distance), coords, True]
        self._entries[coords] = entry
        heapq.heappush(self._heap, entry)

    def _discard_invalid(self) -> None:
        while self._heap and not self._heap[0][_LIVE]:
            heapq.heappop(self._heap)

    def peek_min(self) -> tuple[Coordinate, float]:
        """
        Smallest entry without removing it.

        Raises:
            IndexError: If the trial set is empty
        """
        self._discard_invalid()
        if not self._heap:
            raise IndexError("peek from an empty trial set")
        entry = self._heap[0]
        return entry[_COORDS], entry[_DISTANCE]

    def extract_min(self) -> tuple[Coordinate, float]:
        """
        Remove and return the entry with the smallest distance.

        Raises:
            IndexError: If the trial set is empty
        """
        self._discard_invalid()
        if not self._heap:
            raise IndexError("extract from an empty trial set")

        distance, coords, _ = heapq.heappop(self._heap)
        del self._entries[coords]
        return coords, distance

    def reprioritize(self, coords: Coordinate, old_distance: float, new_distance: float) -> bool:
        """
        Move ``coords`` from ``old_distance`` to a smaller ``new_distance``.

        Only an entry matching ``(coords, old_distance)`` is replaced. If none
        exists, or ``new_distance`` is not smaller, nothing happens.

        Returns:
            True if the entry was replaced
        """
        if not new_distance < old_distance:
            return False

        entry = self._entries.get(coords)
        if entry is None or entry[_DISTANCE] != float(old_distance):
            return False

        entry[_LIVE] = False
        fresh = [float(new_distance), coords, True]
        self._entries[coords] = fresh
        heapq.heappush(self._heap, fresh)
        return True

    def discard(self, coords: Coordinate) -> bool:
        """
        Remove the entry of ``coords`` if it has one.

        Returns:
            True if an entry was removed
        """
        entry = self._entries.pop(coords, None)
        if entry is None:
            return False

        entry[_LIVE] = False
        return True

    def distance_of(self, coords: Coordinate) -> float | None:
        """Stored distance of ``coords``, or None if it has no entry."""
        entry = self._entries.get(coords)
        return None if entry is None else entry[_DISTANCE]

    def items(self) -> Iterator[tuple[Coordinate, float]]:
        """Live ``(coords, distance)`` pairs in no particular order."""
        for coords, entry in self._entries.items():
            yield coords, entry[_DISTANCE]

    def clear(self) -> None:
        self._heap.clear()
        self._entries.clear()
