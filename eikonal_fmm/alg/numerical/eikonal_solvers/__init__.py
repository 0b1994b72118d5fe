"""
Eikonal solvers on N-dimensional structured grids.

- FastMarching: single-pass front propagation from seed cells
- solve_eikonal_equation: first-order upwind update at one cell
- TrialSet: narrow band priority structure with decrease-key
"""

from .eikonal_update import (
    distance_sentinel,
    solve_eikonal_equation,
    solve_quadratic_update,
    upwind_minima,
)
from .fast_marching import FastMarching
from .trial_set import TrialSet

__all__ = [
    "FastMarching",
    "TrialSet",
    "distance_sentinel",
    "solve_eikonal_equation",
    "solve_quadratic_update",
    "upwind_minima",
]
