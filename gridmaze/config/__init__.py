"""
Configuration for gridmaze.

Option models are validated with pydantic; invalid values surface as
``ConfigurationError`` naming the option and the algorithm.
"""

from .options import (
    LOOP_ALGORITHMS,
    OPTIONS_MODELS,
    PERFECT_ALGORITHMS,
    AlgorithmOptions,
    BraidedOptions,
    MazeAlgorithm,
    MultiLayerOptions,
    SparseLoopOptions,
    parse_options,
    resolve_algorithm,
)
from .pydantic_config import DistributionTarget, MazeConfig, build_config

__all__ = [
    "LOOP_ALGORITHMS",
    "OPTIONS_MODELS",
    "PERFECT_ALGORITHMS",
    "AlgorithmOptions",
    "BraidedOptions",
    "DistributionTarget",
    "MazeAlgorithm",
    "MazeConfig",
    "MultiLayerOptions",
    "SparseLoopOptions",
    "build_config",
    "parse_options",
    "resolve_algorithm",
]
