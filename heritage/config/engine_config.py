"""Engine configuration dataclasses."""

from dataclasses import dataclass, field, replace
from typing import Optional

from heritage.config.lineage import (
    DEFAULT_ANCESTOR_DEPTH,
    MIN_CONTRIBUTING_ANCESTORS,
    SPECIALIZATION_THRESHOLD,
)


def validate_specialization_bounds(threshold: float, min_contributing_ancestors: int) -> None:
    """Reject bounds looser than the catalog's specialization rule.

    Stricter bounds are allowed; looser ones would report lineages as
    specialized that the ``specialized_lineage`` rule does not accept.

    Raises:
        ValueError: If either bound is below its minimum
    """
    if threshold < SPECIALIZATION_THRESHOLD:
        raise ValueError(
            f"specialization_threshold must be at least {SPECIALIZATION_THRESHOLD}, got {threshold}"
        )
    if min_contributing_ancestors < MIN_CONTRIBUTING_ANCESTORS:
        raise ValueError(
            f"min_contributing_ancestors must be at least {MIN_CONTRIBUTING_ANCESTORS}, "
            f"got {min_contributing_ancestors}"
        )


@dataclass(frozen=True)
class LineageConfig:
    """Bounds for ancestry walks and specialization detection.

    The specialization bounds may only be tightened.
    """

    max_depth: int = DEFAULT_ANCESTOR_DEPTH
    specialization_threshold: float = SPECIALIZATION_THRESHOLD
    min_contributing_ancestors: int = MIN_CONTRIBUTING_ANCESTORS

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth cannot be negative, got {self.max_depth}")
        validate_specialization_bounds(
            self.specialization_threshold, self.min_contributing_ancestors
        )


@dataclass(frozen=True)
class EngineConfig:
    """Runtime options for the epigenetic trait engine.

    Attributes:
        lineage: Walk depth and specialization thresholds.
        concurrent_analysis: Run inbreeding and lineage analysis as parallel
            tasks instead of one after the other.
        seed: Seed for the per-invocation RNG when the caller passes none.
            None means a fresh unseeded generator per birth.
    """

    lineage: LineageConfig = field(default_factory=LineageConfig)
    concurrent_analysis: bool = True
    seed: Optional[int] = None

    def with_seed(self, seed: Optional[int]) -> "EngineConfig":
        return replace(self, seed=seed)
