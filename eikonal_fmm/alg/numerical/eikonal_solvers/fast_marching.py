"""
Fast Marching Method on N-dimensional structured grids.

Computes arrival times u from a set of seed cells by solving the Eikonal
equation |grad u| = 1 / f on a unit grid, visiting cells in non-decreasing
order of arrival time (a Dijkstra-like single pass).

State machine:
    FAR -> TRIAL -> ALIVE, with FORBIDDEN cells excluded from propagation.

    1. Seeds become ALIVE; their in-margin neighbours become TRIAL with the
       neighbour's own cost as initial distance.
    2. Repeatedly extract the TRIAL cell with the smallest distance, freeze
       it (ALIVE) and update each non-ALIVE, non-FORBIDDEN neighbour with the
       local upwind solve, inserting or reprioritizing it in the trial set.

References:
    - Sethian (1996): A fast marching level set method for monotonically
      advancing fronts
    - Sethian (1999): Level Set Methods and Fast Marching Methods
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import numpy as np

from eikonal_fmm.config import FastMarchingConfig
from eikonal_fmm.geometry.neighbors import (
    iter_neighbors,
    neighbor_offsets,
    to_coordinates,
    to_linear_index,
)
from eikonal_fmm.hooks.composition import as_hooks
from eikonal_fmm.types import NO_PREDECESSOR, CellState, MarchingState
from eikonal_fmm.utils.exceptions import (
    NonPositiveCostError,
    validate_array_dimensions,
    validate_coordinate,
    validate_grid_shape,
)
from eikonal_fmm.utils.fmm_logging import get_logger, log_marching_completion, log_marching_start
from eikonal_fmm.utils.paths import backtrack_path
from eikonal_fmm.utils.solver_result import MarchingResult

from .eikonal_update import solve_eikonal_equation
from .trial_set import TrialSet

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from numpy.typing import NDArray

    from eikonal_fmm.hooks.base import MarchingHooks
    from eikonal_fmm.types import Coordinate, CostField, Offset

logger = get_logger(__name__)


class FastMarching:
    """
    Fast marching engine over a cost field.

    The engine keeps a view of the caller's cost array (no copy) and owns its
    state, distance and predecessor grids plus the trial set. One instance
    serves one ``reset -> initialize_alive_points -> run`` cycle at a time and
    can be reused through :meth:`reset`. Separate instances may share one
    cost array read-only.

    Cells whose cost is zero or negative must be marked Forbidden before
    running (see :meth:`forbid_invalid_costs`); with ``validate_cost``
    enabled the engine raises NonPositiveCostError instead of dividing by
    such a cost.

    Example:
        >>> cost = np.ones((5, 5))
        >>> fm = FastMarching(cost, config=FastMarchingConfig(margin=0))
        >>> fm.initialize_alive_points([(2, 2)])
        >>> fm.run()
        >>> float(fm.distance((2, 3)))
        1.0
    """

    solver_name = "FastMarching"

    def __init__(
        self,
        cost: CostField,
        limit: float | None = None,
        config: FastMarchingConfig | None = None,
        hooks: MarchingHooks | Callable | None = None,
    ) -> None:
        """
        Initialize the engine. Time complexity: O(V).

        Args:
            cost: Per-cell cost field, any number of axes
            limit: Distance limit (default: ``config.limit``, else the sentinel maximum)
            config: Engine configuration (default: FastMarchingConfig())
            hooks: Observer hooks, or a plain ``callback(coords, distance)``

        Raises:
            ConfigurationError: If the grid has no interior cell for the margin
        """
        self.config = config if config is not None else FastMarchingConfig()

        self._cost = np.asarray(cost)
        validate_grid_shape(self._cost.shape, self.config.margin, solver_name=self.solver_name)

        dtype = self._cost.dtype if np.issubdtype(self._cost.dtype, np.floating) else np.dtype(np.float64)
        self._sentinel = float(np.finfo(dtype).max)

        self._states = np.empty(self._cost.shape, dtype=np.uint8)
        self._distances = np.empty(self._cost.shape, dtype=dtype)
        self._predecessors = np.empty(self._cost.shape, dtype=np.int64)
        self._trial_set = TrialSet()

        self._offsets = neighbor_offsets(self._cost.ndim)
        self._margin = self.config.margin

        if limit is None:
            limit = self.config.limit
        self._limit = self._sentinel if limit is None else float(limit)

        self.hooks = as_hooks(hooks)

        self._frozen_count = 0
        self._stale_extractions = 0
        self._stopped_early = False
        self._execution_time: float | None = None

        self.reset()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def cost(self) -> CostField:
        return self._cost

    @property
    def distances(self) -> NDArray[np.floating]:
        """Distance field (live view)."""
        return self._distances

    @property
    def states(self) -> NDArray[np.uint8]:
        """State field (live view) holding ``CellState`` values."""
        return self._states

    @property
    def predecessors(self) -> NDArray[np.int64]:
        """Predecessor field (live view) of C-order linear indices."""
        return self._predecessors

    @property
    def trial_set(self) -> TrialSet:
        return self._trial_set

    @property
    def shape(self) -> tuple[int, ...]:
        return self._cost.shape

    @property
    def dimension(self) -> int:
        return self._cost.ndim

    @property
    def offsets(self) -> tuple[Offset, ...]:
        return self._offsets

    @property
    def margin(self) -> int:
        return self._margin

    @property
    def limit(self) -> float:
        return self._limit

    @property
    def sentinel(self) -> float:
        """Distance of cells that have not been reached."""
        return self._sentinel

    @property
    def frozen_count(self) -> int:
        return self._frozen_count

    @property
    def stale_extractions(self) -> int:
        return self._stale_extractions

    @property
    def stopped_early(self) -> bool:
        return self._stopped_early

    def distance(self, coords: Sequence[int]) -> float:
        return float(self._distances[tuple(coords)])

    def state(self, coords: Sequence[int]) -> CellState:
        return CellState(int(self._states[tuple(coords)]))

    def predecessor(self, coords: Sequence[int]) -> int:
        return int(self._predecessors[tuple(coords)])

    def to_index(self, coords: Sequence[int]) -> int:
        return to_linear_index(coords, self.shape)

    def to_coords(self, index: int) -> Coordinate:
        return to_coordinates(index, self.shape)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """Set every cell to FAR with unknown distance and no predecessor."""
        self._states.fill(CellState.FAR)
        self._distances.fill(self._sentinel)
        self._predecessors.fill(NO_PREDECESSOR)
        self._trial_set.clear()

        self._frozen_count = 0
        self._stale_extractions = 0
        self._stopped_early = False
        self._execution_time = None

    def mark_forbidden(self, cells: NDArray[np.bool_] | Iterable[Sequence[int]]) -> int:
        """
        Exclude cells from propagation.

        May be called after seeding: cells already in the trial set lose their
        entry and their distance, so they are never frozen and never feed a
        neighbour's update.

        Args:
            cells: Boolean mask of the grid's shape, or an iterable of coordinates

        Returns:
            Number of cells marked

        Raises:
            DimensionMismatchError: If a mask does not match the grid
            SeedOutOfBoundsError: If a coordinate is outside the grid
        """
        if isinstance(cells, np.ndarray) and cells.dtype == np.bool_:
            validate_array_dimensions(cells, self.shape, "forbidden mask", solver_name=self.solver_name)
            self._forbid_mask(cells)
            return int(np.count_nonzero(cells))

        coords = [validate_coordinate(c, self.shape, solver_name=self.solver_name) for c in cells]
        mask = np.zeros(self.shape, dtype=bool)
        for c in coords:
            mask[c] = True
        self._forbid_mask(mask)
        return len(coords)

    def forbid_invalid_costs(self) -> int:
        """Mark every cell whose cost is not finite or is <= 0 as FORBIDDEN."""
        invalid = ~np.isfinite(self._cost) | (self._cost <= 0)
        count = int(np.count_nonzero(invalid))
        if count:
            self._forbid_mask(invalid)
            logger.debug(f"Forbidden {count} cells with invalid cost")
        return count

    def _forbid_mask(self, mask: NDArray[np.bool_]) -> None:
        # Cells already queued leave the trial set so they are never frozen
        for c in np.argwhere(mask & (self._states == CellState.TRIAL)):
            self._trial_set.discard(tuple(int(i) for i in c))
        self._states[mask] = CellState.FORBIDDEN
        self._distances[mask] = self._sentinel
        self._predecessors[mask] = NO_PREDECESSOR

    def initialize_alive_points(self, seeds: Iterable[Sequence[int]]) -> None:
        """
        Bootstrap the fast marching from ``seeds``.

        Seeds become ALIVE at distance 0. Each in-margin neighbour of a seed
        that is neither ALIVE nor FORBIDDEN becomes TRIAL with its own cost
        as distance and the seed as predecessor. Seeds without such
        neighbours are accepted and never propagate.

        Raises:
            SeedOutOfBoundsError: If any seed is outside the grid (nothing is modified)
            NonPositiveCostError: If a seed neighbour has cost <= 0 and validation is on
        """
        points = [validate_coordinate(p, self.shape, solver_name=self.solver_name) for p in seeds]

        for p in points:
            self._states[p] = CellState.ALIVE
            self._distances[p] = 0

        for p in points:
            p_index = self.to_index(p)
            for n in iter_neighbors(p, self.shape, self._margin, self._offsets):
                if self._states[n] in (CellState.ALIVE, CellState.FORBIDDEN):
                    continue

                fx = self._cost_at(n)
                self._distances[n] = fx
                self._predecessors[n] = p_index

                if self._states[n] == CellState.TRIAL:
                    # Neighbour of several seeds: already queued with the same cost
                    continue

                self._states[n] = CellState.TRIAL
                self._trial_set.insert(n, float(self._distances[n]))

        logger.debug(f"Initialized {len(points)} alive points, {len(self._trial_set)} trial points")

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        """
        Propagate the front until the trial set is exhausted.

        The run also ends early when ``stop_at_limit`` is configured and the
        next trial distance exceeds the limit, or when a hook returns "stop".
        Running with an empty trial set is a no-op.

        Raises:
            NonPositiveCostError: If a reachable cell has cost <= 0 and validation is on
            ZeroDivisionError: If a reachable cell has cost 0 and validation is off
        """
        start_time = time.perf_counter()
        log_marching_start(logger, self.solver_name, self._describe())

        if self.hooks is not None:
            self.hooks.on_run_start(MarchingState(None, 0.0, self._frozen_count, len(self._trial_set)))

        while self._trial_set:
            if self.config.stop_at_limit and self._trial_set.peek_min()[1] > self._limit:
                logger.debug(f"Next trial distance exceeds limit {self._limit:.6g}, stopping")
                self._stopped_early = True
                break

            p, dist_p = self._trial_set.extract_min()

            if self._states[p] != CellState.TRIAL:
                self._stale_extractions += 1
                logger.debug(f"Skipping stale trial entry {p} at {dist_p:.6g}")
                if self.hooks is not None:
                    self.hooks.on_stale_entry(p, dist_p)
                continue

            self._states[p] = CellState.ALIVE
            self._frozen_count += 1
            self._update_neighbors(p)

            if self.config.progress_interval and self._frozen_count % self.config.progress_interval == 0:
                logger.info(
                    f"Frozen {self._frozen_count} cells - front at {dist_p:.6g}, trial={len(self._trial_set)}"
                )

            if self.hooks is not None:
                control = self.hooks.on_cell_frozen(
                    MarchingState(p, float(self._distances[p]), self._frozen_count, len(self._trial_set))
                )
                if control == "stop":
                    logger.debug(f"Run cancelled by hook after {self._frozen_count} cells")
                    self._stopped_early = True
                    break

        self._execution_time = time.perf_counter() - start_time
        log_marching_completion(
            logger,
            self.solver_name,
            self._frozen_count,
            self._stale_extractions,
            self._execution_time,
            self._stopped_early,
        )

        if self.hooks is not None:
            self.hooks.on_run_end(self.result())

    def _update_neighbors(self, p: Coordinate) -> None:
        """Relax every in-margin, non-ALIVE, non-FORBIDDEN neighbour of the frozen cell ``p``."""
        p_index = self.to_index(p)

        for n in iter_neighbors(p, self.shape, self._margin, self._offsets):
            state_n = self._states[n]
            if state_n == CellState.ALIVE or state_n == CellState.FORBIDDEN:
                continue

            # At this point the neighbour is either FAR or TRIAL.
            previous = float(self._distances[n])
            candidate = solve_eikonal_equation(n, self._cost_at(n), self._distances, self._sentinel)
            if candidate < previous:
                self._distances[n] = candidate
                self._predecessors[n] = p_index

            if state_n == CellState.FAR:
                self._states[n] = CellState.TRIAL
                self._trial_set.insert(n, float(self._distances[n]))
            else:
                # The trial set is keyed on the value that was inserted, not the new one
                self._trial_set.reprioritize(n, previous, float(self._distances[n]))

    def _cost_at(self, coords: Coordinate) -> float:
        fx = float(self._cost[coords])
        if self.config.validate_cost and not fx > 0:
            raise NonPositiveCostError(coords, fx, solver_name=self.solver_name)
        return fx

    # ------------------------------------------------------------------
    # Results
    # ------------------------------------------------------------------

    def result(self) -> MarchingResult:
        """Snapshot (copies) of the current fields and run statistics."""
        return MarchingResult(
            distances=self._distances.copy(),
            states=self._states.copy(),
            predecessors=self._predecessors.copy(),
            frozen_count=self._frozen_count,
            stale_extractions=self._stale_extractions,
            stopped_early=self._stopped_early,
            limit=self._limit,
            execution_time=self._execution_time,
            solver_name=self.solver_name,
            metadata=self._describe(),
        )

    def backtrack(self, target: Sequence[int]) -> list[Coordinate]:
        """Cells from ``target`` back to its seed, following predecessors."""
        return backtrack_path(self._predecessors, target)

    def _describe(self) -> dict[str, Any]:
        return {
            "shape": self.shape,
            "dimension": self.dimension,
            "margin": self._margin,
            "limit": self._limit,
            "stop_at_limit": self.config.stop_at_limit,
            "validate_cost": self.config.validate_cost,
        }

    def __repr__(self) -> str:
        return f"FastMarching(shape={self.shape}, margin={self._margin}, trial={len(self._trial_set)})"
