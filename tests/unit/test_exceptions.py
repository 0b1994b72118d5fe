#!/usr/bin/env python3
"""
Unit tests for eikonal_fmm/utils/exceptions.py

Tests the exception hierarchy and validation helpers including:
- MarchingError message formatting
- SeedOutOfBoundsError, DimensionMismatchError, NonPositiveCostError, ConfigurationError
- Compatibility with built-in exception types
- validate_coordinate, validate_array_dimensions, validate_grid_shape
"""

import pytest

import numpy as np

from eikonal_fmm.utils.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    MarchingError,
    NonPositiveCostError,
    SeedOutOfBoundsError,
    validate_array_dimensions,
    validate_coordinate,
    validate_grid_shape,
)

# =============================================================================
# Test MarchingError (Base Exception)
# =============================================================================


@pytest.mark.unit
def test_marching_error_basic():
    """Test basic MarchingError creation."""
    error = MarchingError("Test error message", solver_name="TestEngine")

    assert "[TestEngine]" in str(error)
    assert "Test error message" in str(error)
    assert error.solver_name == "TestEngine"


@pytest.mark.unit
def test_marching_error_default_solver_name():
    """Test solver name defaults to FastMarching."""
    assert MarchingError("boom").solver_name == "FastMarching"


@pytest.mark.unit
def test_marching_error_full_message():
    """Test suggestion, error code and diagnostics are all rendered."""
    error = MarchingError(
        "Diagnostic test",
        suggested_action="Try a smaller margin",
        error_code="ERR001",
        diagnostic_data={"frozen": 12},
    )

    error_str = str(error)
    assert "Suggestion: Try a smaller margin" in error_str
    assert "Error Code: ERR001" in error_str
    assert "Diagnostic Information" in error_str
    assert "frozen: 12" in error_str


# =============================================================================
# Test specific exceptions
# =============================================================================


@pytest.mark.unit
def test_seed_out_of_bounds_error():
    """Test SeedOutOfBoundsError carries the coordinate and is an IndexError."""
    error = SeedOutOfBoundsError((5, 1), (5, 5))

    assert isinstance(error, IndexError)
    assert isinstance(error, MarchingError)
    assert error.coords == (5, 1)
    assert error.shape == (5, 5)
    assert "SEED_OUT_OF_BOUNDS" in str(error)


@pytest.mark.unit
def test_seed_out_of_bounds_wrong_dimension_suggestion():
    """Test a coordinate of the wrong length gets a dimension hint."""
    error = SeedOutOfBoundsError((1, 1, 1), (5, 5))
    assert "2-dimensional" in str(error)


@pytest.mark.unit
def test_dimension_mismatch_error():
    """Test DimensionMismatchError describes the mismatched axis."""
    error = DimensionMismatchError("forbidden mask", (4, 5), (5, 5), solver_name="FastMarching")

    assert isinstance(error, ValueError)
    assert "DIMENSION_MISMATCH" in str(error)
    assert "axis 0: got 4, expected 5" in str(error)


@pytest.mark.unit
def test_non_positive_cost_error():
    """Test NonPositiveCostError is an ArithmeticError with coordinates."""
    error = NonPositiveCostError((2, 3), 0.0)

    assert isinstance(error, ArithmeticError)
    assert error.coords == (2, 3)
    assert error.cost_value == 0.0
    assert "NON_POSITIVE_COST" in str(error)
    assert "forbid_invalid_costs" in str(error)


@pytest.mark.unit
def test_configuration_error():
    """Test ConfigurationError names the parameter and suggests a fix."""
    error = ConfigurationError("margin", 3, valid_range=(0, 1), reason="no interior cells")

    assert isinstance(error, ValueError)
    assert "'margin'" in str(error)
    assert "Decrease margin to at most 1" in str(error)
    assert "no interior cells" in str(error)


# =============================================================================
# Test validation helpers
# =============================================================================


@pytest.mark.unit
def test_validate_coordinate_normalizes():
    """Test coordinates are returned as tuples of Python ints."""
    coord = validate_coordinate(np.array([1, 2]), (3, 3))

    assert coord == (1, 2)
    assert all(type(c) is int for c in coord)


@pytest.mark.unit
@pytest.mark.parametrize("coords", [(3, 0), (0, -1), (1,), (1, 1, 1)])
def test_validate_coordinate_rejects(coords):
    """Test out-of-grid and wrong-length coordinates are rejected."""
    with pytest.raises(SeedOutOfBoundsError):
        validate_coordinate(coords, (3, 3))


@pytest.mark.unit
def test_validate_coordinate_rejects_scalar():
    """Test a non-iterable coordinate is rejected."""
    with pytest.raises(SeedOutOfBoundsError):
        validate_coordinate(4, (5,))


@pytest.mark.unit
def test_validate_array_dimensions():
    """Test shape validation passes on match and raises on mismatch."""
    validate_array_dimensions(np.zeros((2, 3)), (2, 3), "mask")

    with pytest.raises(DimensionMismatchError):
        validate_array_dimensions(np.zeros((3, 2)), (2, 3), "mask")


@pytest.mark.unit
def test_validate_grid_shape():
    """Test the margin must leave at least one interior cell."""
    validate_grid_shape((3, 3), margin=1)
    validate_grid_shape((1,), margin=0)

    with pytest.raises(ConfigurationError, match="margin"):
        validate_grid_shape((2, 5), margin=1)

    with pytest.raises(ConfigurationError, match="dimension"):
        validate_grid_shape((), margin=0)
