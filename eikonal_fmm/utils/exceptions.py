"""
Exception classes for eikonal_fmm with helpful error messages and user guidance.

Precondition violations (bad seeds, mismatched grids) and fatal numeric errors
(non-positive cost on a reachable cell) surface as the exceptions below. The
negative-discriminant fallback and stale trial-set entries are part of the
algorithm and never raise.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np


class MarchingError(Exception):
    """
    Base exception for front propagation errors with context and suggestions.

    The formatted message carries:
    - Clear error description
    - Solver context information
    - Suggested actions for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        solver_name: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.solver_name = solver_name or "FastMarching"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.solver_name}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class SeedOutOfBoundsError(MarchingError, IndexError):
    """Raised when a seed (or forbidden) coordinate lies outside the grid."""

    def __init__(
        self,
        coords: Sequence[int],
        shape: tuple[int, ...],
        solver_name: str | None = None,
    ):
        self.coords = tuple(int(c) for c in coords)
        self.shape = tuple(shape)

        if len(self.coords) != len(self.shape):
            suggested_action = f"Pass {len(self.shape)}-dimensional coordinates for a grid of shape {self.shape}"
        else:
            suggested_action = "Every coordinate must satisfy 0 <= c[i] < shape[i]"

        super().__init__(
            message=f"Coordinate {self.coords} is outside the grid",
            solver_name=solver_name,
            suggested_action=suggested_action,
            error_code="SEED_OUT_OF_BOUNDS",
            diagnostic_data={"coordinate": self.coords, "grid_shape": self.shape},
        )


class DimensionMismatchError(MarchingError, ValueError):
    """Raised when array dimensions don't match the cost grid."""

    def __init__(
        self,
        array_name: str,
        provided_shape: tuple,
        expected_shape: tuple,
        solver_name: str | None = None,
        context: str | None = None,
    ):
        diagnostic_data = {
            "array_name": array_name,
            "provided_shape": str(provided_shape),
            "expected_shape": str(expected_shape),
            "dimension_mismatch": _describe_dimension_mismatch(provided_shape, expected_shape),
        }

        if context:
            diagnostic_data["context"] = context

        super().__init__(
            message=f"Dimension mismatch for {array_name}",
            solver_name=solver_name,
            suggested_action=_generate_dimension_suggestions(array_name, provided_shape, expected_shape),
            error_code="DIMENSION_MISMATCH",
            diagnostic_data=diagnostic_data,
        )


class NonPositiveCostError(MarchingError, ArithmeticError):
    """Raised when a reachable cell has a cost of zero or less."""

    def __init__(
        self,
        coords: Sequence[int],
        cost_value: float,
        solver_name: str | None = None,
    ):
        self.coords = tuple(int(c) for c in coords)
        self.cost_value = cost_value

        super().__init__(
            message=f"Cell {self.coords} is reachable but has cost {cost_value!r}",
            solver_name=solver_name,
            suggested_action="Mark cells with cost <= 0 as Forbidden before run(), e.g. forbid_invalid_costs()",
            error_code="NON_POSITIVE_COST",
            diagnostic_data={"coordinate": self.coords, "cost": cost_value},
        )


class ConfigurationError(MarchingError, ValueError):
    """Raised when engine configuration is invalid for the given grid."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        valid_range: tuple | None = None,
        solver_name: str | None = None,
        reason: str | None = None,
    ):
        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": str(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        if reason:
            diagnostic_data["reason"] = reason

        super().__init__(
            message=f"Invalid configuration for parameter '{parameter_name}'",
            solver_name=solver_name,
            suggested_action=_generate_configuration_suggestions(parameter_name, provided_value, valid_range),
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


def _describe_dimension_mismatch(provided_shape: tuple, expected_shape: tuple) -> str:
    """Describe the specific nature of dimension mismatch."""
    if len(provided_shape) != len(expected_shape):
        return f"Wrong number of dimensions: got {len(provided_shape)}, expected {len(expected_shape)}"

    mismatches = []
    for i, (provided, expected) in enumerate(zip(provided_shape, expected_shape, strict=True)):
        if provided != expected:
            mismatches.append(f"axis {i}: got {provided}, expected {expected}")

    return " | ".join(mismatches)


def _generate_dimension_suggestions(array_name: str, provided_shape: tuple, expected_shape: tuple) -> str:
    """Generate specific suggestions for dimension errors."""
    if len(provided_shape) < len(expected_shape):
        return f"Add missing dimensions to {array_name}: reshape or expand to {expected_shape}"
    if len(provided_shape) > len(expected_shape):
        return f"Remove extra dimensions from {array_name}: reshape to {expected_shape}"
    return f"Resize {array_name} to match the cost grid: {expected_shape}"


def _generate_configuration_suggestions(parameter_name: str, provided_value: Any, valid_range: tuple | None) -> str:
    """Generate specific suggestions for configuration errors."""
    suggestions = []

    if valid_range and isinstance(provided_value, (int, float)):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    if parameter_name == "margin":
        suggestions.append("Use a smaller margin or a larger grid so at least one interior cell remains")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


def validate_array_dimensions(
    array: np.ndarray, expected_shape: tuple, array_name: str, solver_name: str | None = None
):
    """Validate that array has expected dimensions."""
    if array.shape != tuple(expected_shape):
        raise DimensionMismatchError(
            array_name=array_name,
            provided_shape=array.shape,
            expected_shape=tuple(expected_shape),
            solver_name=solver_name,
        )


def validate_coordinate(
    coords: Sequence[int], shape: tuple[int, ...], solver_name: str | None = None
) -> tuple[int, ...]:
    """Return ``coords`` as a tuple of ints, raising if it is not inside ``shape``."""
    try:
        coord = tuple(int(c) for c in coords)
    except TypeError as e:
        raise SeedOutOfBoundsError((), shape, solver_name=solver_name) from e

    if len(coord) != len(shape) or not all(0 <= c < n for c, n in zip(coord, shape, strict=True)):
        raise SeedOutOfBoundsError(coord, shape, solver_name=solver_name)

    return coord


def validate_grid_shape(shape: tuple[int, ...], margin: int, solver_name: str | None = None):
    """Validate that a grid of ``shape`` has at least one interior cell for ``margin``."""
    if len(shape) < 1:
        raise ConfigurationError(
            parameter_name="dimension",
            provided_value=len(shape),
            valid_range=(1, np.inf),
            solver_name=solver_name,
            reason="Cost grid must have at least one axis",
        )

    smallest = min(shape)
    if smallest < 2 * margin + 1:
        raise ConfigurationError(
            parameter_name="margin",
            provided_value=margin,
            valid_range=(0, (smallest - 1) // 2),
            solver_name=solver_name,
            reason=f"Grid of shape {tuple(shape)} has no interior cells",
        )
