"""Epigenetic trait engine for foals in a breeding simulation.

This package contains the pure breeding logic, with no persistence or HTTP
dependencies. Key modules include:

- epigenetic_engine: At-birth entry point (EpigeneticTraitEngine)
- lineage: Ancestor walks, inbreeding detection, discipline specialization
- traits: Breeding conditions, the trait rule catalog and its engine
- protocols: Collaborator contracts the persistence layer must satisfy
- models: Value objects returned to callers

Design note: this module exposes a small, explicit public API via ``__all__``.
Use direct imports from subpackages for internal helpers.
"""

from heritage.config.engine_config import EngineConfig, LineageConfig
from heritage.epigenetic_engine import EpigeneticTraitEngine, apply_epigenetic_traits_at_birth
from heritage.exceptions import (
    BreedingValidationError,
    CatalogError,
    CollaboratorError,
    HeritageError,
    HorseNotFoundError,
)
from heritage.models import (
    BirthTraitsOutcome,
    BreedingAnalysis,
    CompetitionRecord,
    HorseRecord,
    HorseRef,
    InbreedingResult,
    LineageAnalysis,
    TraitAssignment,
    TraitPolarity,
    TraitRule,
)
from heritage.schemas import BreedingRequest

__all__ = [
    "BirthTraitsOutcome",
    "BreedingAnalysis",
    "BreedingRequest",
    "BreedingValidationError",
    "CatalogError",
    "CollaboratorError",
    "CompetitionRecord",
    "EngineConfig",
    "EpigeneticTraitEngine",
    "HeritageError",
    "HorseNotFoundError",
    "HorseRecord",
    "HorseRef",
    "InbreedingResult",
    "LineageAnalysis",
    "LineageConfig",
    "TraitAssignment",
    "TraitPolarity",
    "TraitRule",
    "apply_epigenetic_traits_at_birth",
]
