"""Static catalog of at-birth trait rules.

Order matters only for the draw sequence: each eligible rule takes the next
value from the invocation RNG, in the order listed here.
"""

from typing import Dict, Iterable, Tuple

from heritage.config.lineage import SPECIALIZATION_THRESHOLD
from heritage.exceptions import CatalogError
from heritage.models import TraitPolarity, TraitRule

POSITIVE = TraitPolarity.POSITIVE
NEGATIVE = TraitPolarity.NEGATIVE


TRAIT_CATALOG: Tuple[TraitRule, ...] = (
    TraitRule(
        name="hardy",
        polarity=POSITIVE,
        probability=0.25,
        predicate=lambda c, lineage, inbreeding: c.stress_at_most(20) and c.feed_at_least(80),
        description="Calm, well-fed mare",
    ),
    TraitRule(
        name="well_bred",
        polarity=POSITIVE,
        probability=0.20,
        predicate=lambda c, lineage, inbreeding: (
            c.stress_at_most(30)
            and c.feed_at_least(70)
            and not inbreeding.inbreeding_detected
        ),
        description="Good conditions and no shared ancestors",
    ),
    TraitRule(
        name="premium_care",
        polarity=POSITIVE,
        probability=0.15,
        predicate=lambda c, lineage, inbreeding: c.stress_at_most(10) and c.feed_at_least(90),
        description="Exceptional mare care",
    ),
    TraitRule(
        name="specialized_lineage",
        polarity=POSITIVE,
        probability=0.30,
        predicate=lambda c, lineage, inbreeding: (
            lineage.discipline_specialization
            and lineage.specialization_strength > SPECIALIZATION_THRESHOLD
        ),
        description="Ancestors dominated one discipline",
    ),
    TraitRule(
        name="inbred",
        polarity=NEGATIVE,
        probability=0.60,
        predicate=lambda c, lineage, inbreeding: inbreeding.inbreeding_detected,
        description="Sire and dam share an ancestor",
    ),
    TraitRule(
        name="weak_constitution",
        polarity=NEGATIVE,
        probability=0.35,
        predicate=lambda c, lineage, inbreeding: c.stress_at_least(70) and c.feed_at_most(40),
        description="Stressed, poorly fed mare",
    ),
    TraitRule(
        name="stressed_lineage",
        polarity=NEGATIVE,
        probability=0.25,
        predicate=lambda c, lineage, inbreeding: c.stress_at_least(60),
        description="High mare stress",
    ),
    TraitRule(
        name="poor_nutrition",
        polarity=NEGATIVE,
        probability=0.40,
        predicate=lambda c, lineage, inbreeding: c.feed_at_most(30),
        description="Very poor feed",
    ),
)


def validate_catalog(rules: Iterable[TraitRule]) -> Tuple[TraitRule, ...]:
    """Check names are unique and probabilities lie in (0, 1].

    Unique names keep positive and negative assignments disjoint.

    Raises:
        CatalogError: On the first invalid rule
    """
    checked = tuple(rules)
    seen = set()
    for rule in checked:
        if rule.name in seen:
            raise CatalogError(f"Duplicate trait rule: {rule.name}")
        if not 0.0 < rule.probability <= 1.0:
            raise CatalogError(
                f"Trait rule {rule.name} has probability {rule.probability}, expected (0, 1]"
            )
        if not isinstance(rule.polarity, TraitPolarity):
            raise CatalogError(f"Trait rule {rule.name} has invalid polarity {rule.polarity!r}")
        seen.add(rule.name)
    return checked


_RULES_BY_NAME: Dict[str, TraitRule] = {rule.name: rule for rule in validate_catalog(TRAIT_CATALOG)}


def get_rule(name: str) -> TraitRule:
    """Look a catalog rule up by trait name.

    Raises:
        KeyError: If no rule has that name
    """
    return _RULES_BY_NAME[name]
