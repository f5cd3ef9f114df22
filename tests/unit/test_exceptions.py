#!/usr/bin/env python3
"""
Unit tests for gridmaze/utils/exceptions.py

Tests the structured exception hierarchy including:
- MazeError (base exception)
- ConfigurationError (invalid dimensions and options)
- StructuralError, StepBudgetExceededError, ConnectivityError
- UnsolvableMazeError
- Validation utilities
"""

import pytest

from gridmaze.utils.exceptions import (
    ConfigurationError,
    ConnectivityError,
    MazeError,
    StepBudgetExceededError,
    StructuralError,
    UnsolvableMazeError,
    validate_dimensions,
    validate_parameter_value,
)

# =============================================================================
# Test MazeError (Base Exception)
# =============================================================================


@pytest.mark.unit
def test_maze_error_basic():
    """Test basic MazeError creation."""
    error = MazeError("Test error message", algorithm_name="wilsons")

    assert str(error) == "[wilsons] Test error message"
    assert error.message == "Test error message"
    assert error.algorithm_name == "wilsons"
    assert error.diagnostic_data == {}


@pytest.mark.unit
def test_maze_error_default_component():
    """Test MazeError without an algorithm name."""
    assert str(MazeError("boom")).startswith("[gridmaze] boom")


@pytest.mark.unit
def test_maze_error_full_message():
    """Test that suggestion, code and diagnostics are all rendered."""
    error = MazeError(
        "Test error",
        algorithm_name="prims",
        suggested_action="Try again",
        error_code="E001",
        diagnostic_data={"cells": 16},
    )
    message = str(error)

    assert "Suggestion: Try again" in message
    assert "Error Code: E001" in message
    assert "Diagnostic Information:" in message
    assert "cells: 16" in message


# =============================================================================
# Test ConfigurationError
# =============================================================================


@pytest.mark.unit
def test_configuration_error_range_suggestion():
    """Test suggestions for out-of-range values."""
    low = ConfigurationError("width", 1, valid_range=(2, 500))
    high = ConfigurationError("width", 900, valid_range=(2, 500))

    assert "Increase width to at least 2" in str(low)
    assert "Decrease width to at most 500" in str(high)
    assert low.error_code == "INVALID_CONFIGURATION"


@pytest.mark.unit
def test_configuration_error_type_suggestion():
    """Test suggestions for wrongly typed values."""
    error = ConfigurationError("height", "10", expected_type=int)

    assert "Convert height to int" in str(error)
    assert error.diagnostic_data["provided_type"] == "str"
    assert error.diagnostic_data["expected_type"] == "int"


@pytest.mark.unit
def test_configuration_error_is_value_error():
    """Test that ConfigurationError can be caught as ValueError."""
    with pytest.raises(ValueError):
        raise ConfigurationError("layers", 9, valid_range=(2, 5))


@pytest.mark.unit
def test_configuration_error_reason():
    error = ConfigurationError("start", (9, 9), reason="outside the 4x4 grid")
    assert error.diagnostic_data["reason"] == "outside the 4x4 grid"


# =============================================================================
# Test Generation Errors
# =============================================================================


@pytest.mark.unit
def test_structural_error():
    error = StructuralError("Generated maze failed validation", algorithm_name="kruskals")

    assert isinstance(error, MazeError)
    assert error.error_code == "STRUCTURAL_FAILURE"
    assert "[kruskals]" in str(error)


@pytest.mark.unit
def test_step_budget_exceeded_error():
    error = StepBudgetExceededError(100, 100, algorithm_name="aldous-broder", visited_cells=40, total_cells=64)

    assert error.steps_taken == 100
    assert error.max_steps == 100
    assert error.diagnostic_data["visited_cells"] == "40/64"
    assert "Exceeded step budget of 100 steps" in str(error)


@pytest.mark.unit
def test_connectivity_error():
    error = ConnectivityError(10, 25, algorithm_name="braided", stage="braiding")

    assert error.reached_cells == 10
    assert error.total_cells == 25
    assert "10/25" in str(error)
    assert error.diagnostic_data["stage"] == "braiding"


@pytest.mark.unit
def test_unsolvable_maze_error():
    error = UnsolvableMazeError(10, algorithm_name="sidewinder")

    assert error.attempts == 10
    assert error.error_code == "UNSOLVABLE"
    assert "after 10 attempts" in str(error)


# =============================================================================
# Test Validation Utilities
# =============================================================================


@pytest.mark.unit
@pytest.mark.parametrize("value", [2, 50, 100])
def test_validate_parameter_value_accepts(value):
    validate_parameter_value(value, "size", expected_type=int, valid_range=(2, 100))


@pytest.mark.unit
@pytest.mark.parametrize("value", [1, 101, 5.0, "5", True])
def test_validate_parameter_value_rejects(value):
    with pytest.raises(ConfigurationError):
        validate_parameter_value(value, "size", expected_type=int, valid_range=(2, 100))


@pytest.mark.unit
def test_validate_dimensions_names_parameter():
    with pytest.raises(ConfigurationError) as exc_info:
        validate_dimensions(10, 1, algorithm_name="ellers", max_size=500)

    assert exc_info.value.parameter_name == "height"
    assert exc_info.value.algorithm_name == "ellers"


@pytest.mark.unit
def test_validate_dimensions_max_size():
    validate_dimensions(500, 500, max_size=500)
    with pytest.raises(ConfigurationError):
        validate_dimensions(501, 2, max_size=500)
