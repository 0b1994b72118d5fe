"""
High-Level Distance Map Interface

Provides a simple interface for computing arrival times from seed cells.

Example:
    >>> import numpy as np
    >>> from eikonal_fmm import compute_distance_map
    >>>
    >>> cost = np.ones((64, 64))
    >>> result = compute_distance_map(cost, seeds=[(32, 32)])
    >>> u = result.finite_distances()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from eikonal_fmm.alg.numerical.eikonal_solvers import FastMarching
from eikonal_fmm.utils.fmm_logging import LoggedOperation, get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    import numpy as np
    from numpy.typing import NDArray

    from eikonal_fmm.config import FastMarchingConfig
    from eikonal_fmm.hooks import MarchingHooks
    from eikonal_fmm.types import CostField
    from eikonal_fmm.utils.solver_result import MarchingResult

logger = get_logger(__name__)


def compute_distance_map(
    cost: CostField,
    seeds: Iterable[Sequence[int]],
    forbidden: NDArray[np.bool_] | Iterable[Sequence[int]] | None = None,
    limit: float | None = None,
    config: FastMarchingConfig | None = None,
    hooks: MarchingHooks | Callable | None = None,
    forbid_invalid: bool = False,
) -> MarchingResult:
    """
    Run the fast marching method once and return its result.

    This is a convenience function that creates an engine, marks Forbidden
    cells, seeds it and runs it to completion. For repeated runs over the
    same cost field, create a FastMarching engine and call reset() between
    runs.

    Args:
        cost: Per-cell cost field
        seeds: Seed coordinates (arrival time 0)
        forbidden: Boolean mask or coordinates of cells excluded from propagation
        limit: Distance limit (default: taken from ``config``)
        config: Engine configuration (default: FastMarchingConfig())
        hooks: Observer hooks, or a plain ``callback(coords, distance)``
        forbid_invalid: Also forbid cells whose cost is not finite or is <= 0

    Returns:
        MarchingResult with distances, states, predecessors and run statistics

    Raises:
        SeedOutOfBoundsError: If a seed or forbidden coordinate is outside the grid
        NonPositiveCostError: If a reachable cell has cost <= 0

    Example:
        >>> result = compute_distance_map(cost, seeds=[(0, 0)], forbidden=walls)
        >>> path = result.path_to((10, 20))
    """
    engine = FastMarching(cost, limit=limit, config=config, hooks=hooks)

    with LoggedOperation(logger, f"distance map on grid {engine.shape}"):
        if forbidden is not None:
            engine.mark_forbidden(forbidden)
        if forbid_invalid:
            engine.forbid_invalid_costs()

        engine.initialize_alive_points(seeds)
        engine.run()

    return engine.result()
