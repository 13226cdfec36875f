"""Breeding conditions at the time of birth.

Two numbers drive the condition-based trait rules: mare stress and feed
quality, both on a 0-100 scale. The breeding request may supply either;
whatever it leaves out is derived from the mare's persisted record.

Derivation policy (monotonic in every input):
- stress = stress_level + 0.2 * (100 - health) + 0.2 * max(0, 50 - bond)
- feed = 0.4 * health + 0.3 * bond + 0.3 * earnings_score
  where earnings_score = 100 * min(earnings / 100000, 1)

Higher stress level, worse health or a weaker bond never lowers derived
stress; worse health, a weaker bond or lower earnings never raises derived
feed quality.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from heritage.config.conditions import (
    BOND_COMFORT_LEVEL,
    BOND_STRESS_WEIGHT,
    CONDITION_MAX,
    CONDITION_MIN,
    DEFAULT_BOND_SCORE,
    DEFAULT_HEALTH_SCORE,
    DEFAULT_STRESS_LEVEL,
    FEED_BOND_WEIGHT,
    FEED_EARNINGS_WEIGHT,
    FEED_HEALTH_WEIGHT,
    HEALTH_SCORES,
    HEALTH_STRESS_WEIGHT,
    PREMIUM_FEED_EARNINGS,
)
from heritage.models import HorseRecord

SOURCE_EXPLICIT = "explicit"
SOURCE_DERIVED = "derived"
SOURCE_MIXED = "mixed"


@dataclass(frozen=True)
class ConditionSnapshot:
    """Normalized mare stress and feed quality for one birth."""

    mare_stress: float
    feed_quality: float
    source: str = SOURCE_EXPLICIT

    def stress_at_most(self, limit: float) -> bool:
        return self.mare_stress <= limit

    def stress_at_least(self, limit: float) -> bool:
        return self.mare_stress >= limit

    def feed_at_least(self, limit: float) -> bool:
        return self.feed_quality >= limit

    def feed_at_most(self, limit: float) -> bool:
        return self.feed_quality <= limit

    def to_dict(self) -> Dict[str, Any]:
        return {
            "mareStress": self.mare_stress,
            "feedQuality": self.feed_quality,
            "source": self.source,
        }


def clamp_condition(value: float) -> float:
    return max(CONDITION_MIN, min(CONDITION_MAX, float(value)))


def health_score(health_status: Optional[str]) -> float:
    """Map a persisted health status to a 0-100 score."""
    if not isinstance(health_status, str) or not health_status:
        return DEFAULT_HEALTH_SCORE
    return HEALTH_SCORES.get(health_status.strip().lower(), DEFAULT_HEALTH_SCORE)


def derive_mare_stress(mare: HorseRecord) -> float:
    stress_level = DEFAULT_STRESS_LEVEL if mare.stress_level is None else mare.stress_level
    bond = DEFAULT_BOND_SCORE if mare.bond_score is None else mare.bond_score

    stress = (
        stress_level
        + HEALTH_STRESS_WEIGHT * (CONDITION_MAX - health_score(mare.health_status))
        + BOND_STRESS_WEIGHT * max(0.0, BOND_COMFORT_LEVEL - bond)
    )
    return clamp_condition(stress)


def derive_feed_quality(mare: HorseRecord) -> float:
    bond = DEFAULT_BOND_SCORE if mare.bond_score is None else mare.bond_score
    earnings = max(0.0, mare.total_earnings or 0.0)
    earnings_score = CONDITION_MAX * min(earnings / PREMIUM_FEED_EARNINGS, 1.0)

    feed = (
        FEED_HEALTH_WEIGHT * health_score(mare.health_status)
        + FEED_BOND_WEIGHT * clamp_condition(bond)
        + FEED_EARNINGS_WEIGHT * earnings_score
    )
    return clamp_condition(feed)


def evaluate_conditions(
    mare: HorseRecord,
    mare_stress: Optional[float] = None,
    feed_quality: Optional[float] = None,
) -> ConditionSnapshot:
    """Build the condition snapshot for a birth.

    Explicit values win and are clamped to 0-100. Each missing value is
    derived from ``mare`` on its own.
    """
    stress = derive_mare_stress(mare) if mare_stress is None else clamp_condition(mare_stress)
    feed = derive_feed_quality(mare) if feed_quality is None else clamp_condition(feed_quality)

    if mare_stress is not None and feed_quality is not None:
        source = SOURCE_EXPLICIT
    elif mare_stress is None and feed_quality is None:
        source = SOURCE_DERIVED
    else:
        source = SOURCE_MIXED

    return ConditionSnapshot(mare_stress=stress, feed_quality=feed, source=source)
