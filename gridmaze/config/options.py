"""
Algorithm names and per-algorithm option models.

Options are pydantic models with strictly typed, range-checked fields. Unknown keys are
rejected, and every pydantic ``ValidationError`` is converted into a
``ConfigurationError`` naming the offending option and the algorithm.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt, ValidationError, field_validator

from gridmaze.utils.exceptions import ConfigurationError


class MazeAlgorithm(str, Enum):
    """The twelve supported generation algorithms."""

    BINARY_TREE = "binary-tree"
    SIDEWINDER = "sidewinder"
    RECURSIVE_BACKTRACKER = "recursive-backtracker"
    HUNT_AND_KILL = "hunt-and-kill"
    ALDOUS_BRODER = "aldous-broder"
    ELLERS = "ellers"
    PRIMS = "prims"
    KRUSKALS = "kruskals"
    WILSONS = "wilsons"
    BRAIDED = "braided"
    SPARSE_LOOP = "sparse-loop"
    MULTI_LAYER = "multi-layer"


PERFECT_ALGORITHMS: frozenset[MazeAlgorithm] = frozenset(
    {
        MazeAlgorithm.BINARY_TREE,
        MazeAlgorithm.SIDEWINDER,
        MazeAlgorithm.RECURSIVE_BACKTRACKER,
        MazeAlgorithm.HUNT_AND_KILL,
        MazeAlgorithm.ALDOUS_BRODER,
        MazeAlgorithm.ELLERS,
        MazeAlgorithm.PRIMS,
        MazeAlgorithm.KRUSKALS,
        MazeAlgorithm.WILSONS,
    }
)

# Algorithms that leave loops behind; the only ones single-path reduction applies to
LOOP_ALGORITHMS: frozenset[MazeAlgorithm] = frozenset(
    {MazeAlgorithm.BRAIDED, MazeAlgorithm.SPARSE_LOOP, MazeAlgorithm.MULTI_LAYER}
)


def resolve_algorithm(name: str | MazeAlgorithm) -> MazeAlgorithm:
    """Parse an algorithm name, accepting underscores in place of hyphens."""
    if isinstance(name, MazeAlgorithm):
        return name
    normalized = str(name).strip().lower().replace("_", "-")
    try:
        return MazeAlgorithm(normalized)
    except ValueError:
        raise ConfigurationError(
            parameter_name="algorithm",
            provided_value=name,
            reason=f"expected one of: {', '.join(a.value for a in MazeAlgorithm)}",
        ) from None


class AlgorithmOptions(BaseModel):
    """Options shared by every algorithm (none). Unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True, populate_by_name=True)


class _PostProcessedOptions(AlgorithmOptions):
    base_algorithm: MazeAlgorithm = Field(
        MazeAlgorithm.RECURSIVE_BACKTRACKER,
        validation_alias=AliasChoices("base_algorithm", "baseAlgorithm"),
        description="Perfect-maze algorithm generating the base maze",
    )

    @field_validator("base_algorithm", mode="before")
    @classmethod
    def normalize_base_algorithm(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower().replace("_", "-")
        return v

    @field_validator("base_algorithm")
    @classmethod
    def validate_base_is_perfect(cls, v: MazeAlgorithm) -> MazeAlgorithm:
        """The base maze must be a spanning tree."""
        if v not in PERFECT_ALGORITHMS:
            raise ValueError(f"base_algorithm must be a perfect-maze algorithm, got '{v.value}'")
        return v


class BraidedOptions(_PostProcessedOptions):
    """Options for the braided algorithm."""

    braidness: float = Field(0.5, ge=0.0, le=1.0, strict=True, description="Fraction of dead ends to remove")


class SparseLoopOptions(_PostProcessedOptions):
    """Options for the sparse loop algorithm."""

    loop_fraction: float = Field(
        0.12,
        ge=0.0,
        le=1.0,
        strict=True,
        validation_alias=AliasChoices("loop_fraction", "loopFraction"),
        description="Fraction of remaining internal walls to remove",
    )


class MultiLayerOptions(AlgorithmOptions):
    """Options for the multi-layer algorithm."""

    layers: StrictInt = Field(2, ge=2, le=5, description="Number of layers placed side by side")
    portals: StrictInt = Field(4, ge=1, le=10, description="Number of extra seam openings")


OPTIONS_MODELS: dict[MazeAlgorithm, type[AlgorithmOptions]] = {
    **{algorithm: AlgorithmOptions for algorithm in PERFECT_ALGORITHMS},
    MazeAlgorithm.BRAIDED: BraidedOptions,
    MazeAlgorithm.SPARSE_LOOP: SparseLoopOptions,
    MazeAlgorithm.MULTI_LAYER: MultiLayerOptions,
}


def _field_range(model_cls: type[BaseModel], field_name: str) -> tuple[Any, Any] | None:
    field = model_cls.model_fields.get(field_name)
    if field is None:
        return None
    low = high = None
    for constraint in field.metadata:
        low = getattr(constraint, "ge", low)
        high = getattr(constraint, "le", high)
    if low is None or high is None:
        return None
    return (low, high)


def parse_options(
    algorithm: str | MazeAlgorithm,
    options: Mapping[str, Any] | AlgorithmOptions | None = None,
) -> AlgorithmOptions:
    """
    Validate ``options`` for ``algorithm``.

    Args:
        algorithm: Algorithm name or enum member
        options: Mapping of option values, an options model, or None for defaults

    Returns:
        The validated options model for the algorithm

    Raises:
        ConfigurationError: On unknown keys or out-of-range values
    """
    algorithm = resolve_algorithm(algorithm)
    model_cls = OPTIONS_MODELS[algorithm]

    if options is None:
        return model_cls()
    if isinstance(options, model_cls):
        return options
    if isinstance(options, BaseModel):
        options = options.model_dump()
    if not isinstance(options, Mapping):
        raise ConfigurationError(
            parameter_name="options",
            provided_value=options,
            expected_type=dict,
            algorithm_name=algorithm.value,
        )

    try:
        return model_cls.model_validate(dict(options))
    except ValidationError as exc:
        error = exc.errors()[0]
        name = ".".join(str(part) for part in error["loc"]) or "options"
        raise ConfigurationError(
            parameter_name=name,
            provided_value=error.get("input"),
            valid_range=_field_range(model_cls, name),
            algorithm_name=algorithm.value,
            reason=error["msg"],
        ) from exc
