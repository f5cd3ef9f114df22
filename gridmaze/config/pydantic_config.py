"""
Pydantic configuration for maze generation runs.

``MazeConfig`` describes one generation: algorithm, dimensions, options,
seed and the optional post-processing passes. ``DistributionTarget`` holds
validated degree-ratio targets for the balancer.

Example:
    >>> config = MazeConfig(algorithm="braided", width=20, height=20, options={"braidness": 0.3})
    >>> config.parsed_options().braidness
    0.3
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from gridmaze.config.options import (
    AlgorithmOptions,
    MazeAlgorithm,
    parse_options,
    resolve_algorithm,
)
from gridmaze.utils.exceptions import ConfigurationError

DISTRIBUTION_SUM_TOLERANCE = 0.05


class DistributionTarget(BaseModel):
    """
    Target degree ratios for the distribution balancer.

    Each ratio lies in [0, 1], at least one is positive, and they sum to
    1.0 within ``DISTRIBUTION_SUM_TOLERANCE``. After validation the three
    ratios are normalized so they sum to exactly 1.0.
    """

    dead_ends: float = Field(..., ge=0.0, le=1.0, description="Fraction of cells with one open side")
    three_way: float = Field(..., ge=0.0, le=1.0, description="Fraction of cells with three open sides")
    straight: float = Field(0.0, ge=0.0, le=1.0, description="Fraction of cells with two open sides")

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def validate_and_normalize(self) -> DistributionTarget:
        """Reject all-zero and far-from-one sums, then normalize."""
        total = self.dead_ends + self.three_way + self.straight
        if total == 0:
            raise ValueError("At least one distribution ratio must be greater than 0")
        if abs(total - 1.0) > DISTRIBUTION_SUM_TOLERANCE:
            raise ValueError(f"Distribution ratios sum to {total:.2f}, expected approximately 1.0")

        # Assign through __dict__ to skip re-validation of each field
        self.__dict__["dead_ends"] = self.dead_ends / total
        self.__dict__["three_way"] = self.three_way / total
        self.__dict__["straight"] = self.straight / total
        return self


class MazeConfig(BaseModel):
    """Complete description of one generation run."""

    algorithm: MazeAlgorithm = Field(MazeAlgorithm.RECURSIVE_BACKTRACKER, description="Generation algorithm")
    width: int = Field(20, ge=2, le=1000, description="Columns (per layer for multi-layer)")
    height: int = Field(20, ge=2, le=1000, description="Rows")
    options: dict[str, Any] = Field(default_factory=dict, description="Algorithm-specific options")
    seed: int | None = Field(None, description="Seed for reproducible generation")
    single_path: bool = Field(False, description="Reduce loop algorithms to a perfect maze")
    balance: DistributionTarget | None = Field(None, description="Degree distribution target")

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("algorithm", mode="before")
    @classmethod
    def normalize_algorithm(cls, v: Any) -> Any:
        if isinstance(v, str):
            return resolve_algorithm(v)
        return v

    @model_validator(mode="after")
    def validate_options_for_algorithm(self) -> MazeConfig:
        """Options must be accepted by the chosen algorithm."""
        parse_options(self.algorithm, self.options)
        return self

    def parsed_options(self) -> AlgorithmOptions:
        return parse_options(self.algorithm, self.options)


def build_config(**kwargs: Any) -> MazeConfig:
    """
    Build a ``MazeConfig`` from keyword arguments.

    Raises:
        ConfigurationError: Instead of pydantic's ``ValidationError``, naming
            the offending field
    """
    try:
        return MazeConfig(**kwargs)
    except ValidationError as exc:
        error = exc.errors()[0]
        original = error.get("ctx", {}).get("error")
        if isinstance(original, ConfigurationError):
            raise original from exc
        algorithm = kwargs.get("algorithm")
        raise ConfigurationError(
            parameter_name=".".join(str(part) for part in error["loc"]) or "config",
            provided_value=error.get("input"),
            algorithm_name=getattr(algorithm, "value", algorithm),
            reason=error["msg"],
        ) from exc
