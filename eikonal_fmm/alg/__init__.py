"""
Algorithm structure for eikonal_fmm.

- numerical: Grid-based solvers for the Eikonal equation
"""

from __future__ import annotations

from . import numerical

__all__ = [
    "numerical",
]
