"""Probabilistic evaluation of the trait catalog."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from heritage.models import (
    InbreedingResult,
    LineageAnalysis,
    TraitAssignment,
    TraitPolarity,
    TraitRule,
)
from heritage.protocols import RandomSource
from heritage.traits.catalog import TRAIT_CATALOG, validate_catalog
from heritage.traits.conditions import ConditionSnapshot
from heritage.util.rng import require_rng_param

logger = logging.getLogger(__name__)


class TraitRuleEngine:
    """Applies an ordered rule table to the evidence gathered for a birth.

    Every rule whose predicate holds takes exactly one draw from the RNG, in
    catalog order, and fires when the draw is strictly below its
    probability. Rules are independent: several may fire, none short-circuit
    the rest.
    """

    def __init__(self, rules: Iterable[TraitRule] = TRAIT_CATALOG):
        self.rules = validate_catalog(rules)

    def apply(
        self,
        conditions: ConditionSnapshot,
        lineage: LineageAnalysis,
        inbreeding: InbreedingResult,
        rng: Optional[RandomSource] = None,
    ) -> TraitAssignment:
        """Evaluate every rule and return the traits that fired.

        Args:
            conditions: Mare stress and feed quality
            lineage: Discipline specialization of the combined ancestry
            inbreeding: Shared-ancestor analysis
            rng: Invocation-scoped random source

        Returns:
            Positive and negative trait names, in catalog order
        """
        rng = require_rng_param(rng, "TraitRuleEngine.apply")
        positive: List[str] = []
        negative: List[str] = []

        for rule in self.rules:
            if not rule.evaluate(conditions, lineage, inbreeding):
                continue

            draw = rng.random()
            if not rule.accepts(draw):
                logger.debug(
                    "Rejected %s trait %s (draw %.3f >= %.2f)",
                    rule.polarity.value,
                    rule.name,
                    draw,
                    rule.probability,
                )
                continue

            if rule.polarity is TraitPolarity.POSITIVE:
                positive.append(rule.name)
            else:
                negative.append(rule.name)
            logger.info("Applied %s trait: %s", rule.polarity.value, rule.name)

        return TraitAssignment(positive=tuple(positive), negative=tuple(negative))
