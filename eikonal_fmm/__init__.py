from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("eikonal-fmm")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .alg.numerical.eikonal_solvers import (
    FastMarching,
    TrialSet,
    solve_eikonal_equation,
    solve_quadratic_update,
)
from .config import FastMarchingConfig, load_marching_config, save_marching_config
from .geometry import neighbor_offsets, to_coordinates, to_linear_index
from .hooks import (
    CallbackHook,
    CellBudgetHook,
    ConditionalHook,
    FreezeOrderRecorder,
    MarchingHooks,
    MultiHook,
    ProgressLoggingHook,
)
from .solve_eikonal import compute_distance_map
from .types import CellState, MarchingState
from .utils import (
    ConfigurationError,
    DimensionMismatchError,
    MarchingError,
    MarchingResult,
    NonPositiveCostError,
    SeedOutOfBoundsError,
    backtrack_path,
    configure_logging,
    get_logger,
    reachable_region,
)

__all__ = [
    "CallbackHook",
    "CellBudgetHook",
    "CellState",
    "ConditionalHook",
    "ConfigurationError",
    "DimensionMismatchError",
    "FastMarching",
    "FastMarchingConfig",
    "FreezeOrderRecorder",
    "MarchingError",
    "MarchingHooks",
    "MarchingResult",
    "MarchingState",
    "MultiHook",
    "NonPositiveCostError",
    "ProgressLoggingHook",
    "SeedOutOfBoundsError",
    "TrialSet",
    "__version__",
    "backtrack_path",
    "compute_distance_map",
    "configure_logging",
    "get_logger",
    "load_marching_config",
    "neighbor_offsets",
    "reachable_region",
    "save_marching_config",
    "solve_eikonal_equation",
    "solve_quadratic_update",
    "to_coordinates",
    "to_linear_index",
]
