"""Trait assignment: breeding conditions, the rule catalog and its engine."""

from heritage.traits.catalog import TRAIT_CATALOG, get_rule, validate_catalog
from heritage.traits.conditions import ConditionSnapshot, evaluate_conditions
from heritage.traits.rule_engine import TraitRuleEngine

__all__ = [
    "ConditionSnapshot",
    "TRAIT_CATALOG",
    "TraitRuleEngine",
    "evaluate_conditions",
    "get_rule",
    "validate_catalog",
]
