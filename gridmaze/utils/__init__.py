"""Shared utilities: logging, exceptions and random sources."""

from .exceptions import (
    ConfigurationError,
    ConnectivityError,
    MazeError,
    StepBudgetExceededError,
    StructuralError,
    UnsolvableMazeError,
    validate_dimensions,
    validate_parameter_value,
)
from .logging import LoggedOperation, configure_logging, get_logger
from .random_source import derive_seed, make_rng

__all__ = [
    "ConfigurationError",
    "ConnectivityError",
    "LoggedOperation",
    "MazeError",
    "StepBudgetExceededError",
    "StructuralError",
    "UnsolvableMazeError",
    "configure_logging",
    "derive_seed",
    "get_logger",
    "make_rng",
    "validate_dimensions",
    "validate_parameter_value",
]
