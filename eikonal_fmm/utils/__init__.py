"""
Utility modules for eikonal_fmm: exceptions, logging, results and paths.
"""

from .exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    MarchingError,
    NonPositiveCostError,
    SeedOutOfBoundsError,
    validate_array_dimensions,
    validate_coordinate,
    validate_grid_shape,
)
from .fmm_logging import configure_logging, get_logger
from .paths import backtrack_path
from .solver_result import MarchingResult
from .validation import interior_mask, reachable_region

__all__ = [
    "ConfigurationError",
    "DimensionMismatchError",
    "MarchingError",
    "MarchingResult",
    "NonPositiveCostError",
    "SeedOutOfBoundsError",
    "backtrack_path",
    "configure_logging",
    "get_logger",
    "interior_mask",
    "reachable_region",
    "validate_array_dimensions",
    "validate_coordinate",
    "validate_grid_shape",
]
