"""
Numerical methods for the Eikonal equation.

This module contains classical grid-based approaches:
- eikonal_solvers: Fast marching engine, local upwind update and trial set
"""

from .eikonal_solvers import (
    FastMarching,
    TrialSet,
    solve_eikonal_equation,
    solve_quadratic_update,
)

__all__ = [
    "FastMarching",
    "TrialSet",
    "solve_eikonal_equation",
    "solve_quadratic_update",
]
