"""
Exception classes for gridmaze with helpful error messages.

Every hard failure raised by the generation engine derives from
``MazeError`` and carries the algorithm it came from, an optional
suggestion, a machine-readable error code and diagnostic data. Soft
failures (loops left behind by single-path reduction, balancing that falls
short of its target) are logged instead and never reach this module.
"""

from __future__ import annotations

from typing import Any


class MazeError(Exception):
    """
    Base exception for maze generation errors with context and suggestions.

    Provides structured error information including:
    - Clear error description
    - Algorithm or component name
    - Suggested action for resolution
    - Optional diagnostic data
    """

    def __init__(
        self,
        message: str,
        algorithm_name: str | None = None,
        suggested_action: str | None = None,
        error_code: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.message = message
        self.algorithm_name = algorithm_name or "gridmaze"
        self.suggested_action = suggested_action
        self.error_code = error_code
        self.diagnostic_data = diagnostic_data or {}

        full_message = f"[{self.algorithm_name}] {message}"

        if self.suggested_action:
            full_message += f"\nSuggestion: {self.suggested_action}"

        if self.error_code:
            full_message += f"\nError Code: {self.error_code}"

        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class ConfigurationError(MazeError, ValueError):
    """Raised when a dimension or option value is invalid, before any allocation."""

    def __init__(
        self,
        parameter_name: str,
        provided_value: Any,
        expected_type: type | None = None,
        valid_range: tuple | None = None,
        algorithm_name: str | None = None,
        reason: str | None = None,
    ):
        self.parameter_name = parameter_name
        self.provided_value = provided_value

        diagnostic_data = {
            "parameter": parameter_name,
            "provided_value": repr(provided_value),
            "provided_type": type(provided_value).__name__,
        }

        if expected_type:
            diagnostic_data["expected_type"] = expected_type.__name__

        if valid_range:
            diagnostic_data["valid_range"] = f"[{valid_range[0]}, {valid_range[1]}]"

        if reason:
            diagnostic_data["reason"] = reason

        suggested_action = _generate_configuration_suggestions(
            parameter_name, provided_value, expected_type, valid_range
        )

        super().__init__(
            message=f"Invalid value for parameter '{parameter_name}'",
            algorithm_name=algorithm_name,
            suggested_action=suggested_action,
            error_code="INVALID_CONFIGURATION",
            diagnostic_data=diagnostic_data,
        )


class StructuralError(MazeError):
    """Raised when an internal invariant is broken or a generated maze fails validation."""

    def __init__(
        self,
        message: str,
        algorithm_name: str | None = None,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        super().__init__(
            message=message,
            algorithm_name=algorithm_name,
            suggested_action="This indicates a bug in the generator; please report it with the seed used",
            error_code="STRUCTURAL_FAILURE",
            diagnostic_data=diagnostic_data,
        )


class StepBudgetExceededError(MazeError):
    """Raised when a random walk or hunt loop exceeds its iteration cap."""

    def __init__(
        self,
        steps_taken: int,
        max_steps: int,
        algorithm_name: str | None = None,
        visited_cells: int | None = None,
        total_cells: int | None = None,
    ):
        self.steps_taken = steps_taken
        self.max_steps = max_steps

        diagnostic_data: dict[str, Any] = {
            "steps_taken": steps_taken,
            "max_steps": max_steps,
        }
        if visited_cells is not None and total_cells is not None:
            diagnostic_data["visited_cells"] = f"{visited_cells}/{total_cells}"

        super().__init__(
            message=f"Exceeded step budget of {max_steps} steps",
            algorithm_name=algorithm_name,
            suggested_action="Retry with a different seed or a smaller maze",
            error_code="STEP_BUDGET_EXCEEDED",
            diagnostic_data=diagnostic_data,
        )


class ConnectivityError(MazeError):
    """Raised when a maze that must be fully connected is not."""

    def __init__(
        self,
        reached_cells: int,
        total_cells: int,
        algorithm_name: str | None = None,
        stage: str | None = None,
    ):
        self.reached_cells = reached_cells
        self.total_cells = total_cells

        diagnostic_data: dict[str, Any] = {"reachable_cells": f"{reached_cells}/{total_cells}"}
        if stage:
            diagnostic_data["stage"] = stage

        super().__init__(
            message=f"Maze is not fully connected: {reached_cells}/{total_cells} cells reachable from start",
            algorithm_name=algorithm_name,
            error_code="CONNECTIVITY_LOST",
            diagnostic_data=diagnostic_data,
        )


class UnsolvableMazeError(MazeError):
    """Raised when repeated generation attempts never yield a solvable maze."""

    def __init__(self, attempts: int, algorithm_name: str | None = None):
        self.attempts = attempts
        super().__init__(
            message=f"Could not generate a solvable maze after {attempts} attempts",
            algorithm_name=algorithm_name,
            suggested_action="Increase max_attempts or check the start/finish placement",
            error_code="UNSOLVABLE",
            diagnostic_data={"attempts": attempts},
        )


def _generate_configuration_suggestions(
    parameter_name: str,
    provided_value: Any,
    expected_type: type | None,
    valid_range: tuple | None,
) -> str:
    """Generate specific suggestions for configuration errors."""
    suggestions = []

    if expected_type and not isinstance(provided_value, expected_type):
        suggestions.append(f"Convert {parameter_name} to {expected_type.__name__}")

    if valid_range and isinstance(provided_value, (int, float)) and not isinstance(provided_value, bool):
        if provided_value < valid_range[0]:
            suggestions.append(f"Increase {parameter_name} to at least {valid_range[0]}")
        elif provided_value > valid_range[1]:
            suggestions.append(f"Decrease {parameter_name} to at most {valid_range[1]}")

    return " | ".join(suggestions) if suggestions else f"Check {parameter_name} value and try again"


def validate_parameter_value(
    value: Any,
    parameter_name: str,
    expected_type: type | tuple[type, ...] | None = None,
    valid_range: tuple | None = None,
    algorithm_name: str | None = None,
):
    """Validate parameter value and type."""
    if expected_type and (not isinstance(value, expected_type) or isinstance(value, bool)):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            expected_type=expected_type if isinstance(expected_type, type) else expected_type[0],
            algorithm_name=algorithm_name,
        )

    if valid_range and not (valid_range[0] <= value <= valid_range[1]):
        raise ConfigurationError(
            parameter_name=parameter_name,
            provided_value=value,
            valid_range=valid_range,
            algorithm_name=algorithm_name,
        )


def validate_dimensions(
    width: Any,
    height: Any,
    algorithm_name: str | None = None,
    max_size: int = 1000,
    min_size: int = 2,
):
    """Check that width and height are integers within ``[min_size, max_size]``."""
    for name, value in (("width", width), ("height", height)):
        validate_parameter_value(
            value,
            name,
            expected_type=int,
            valid_range=(min_size, max_size),
            algorithm_name=algorithm_name,
        )
