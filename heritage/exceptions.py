"""Heritage exception hierarchy.

Centralised base classes so callers can tell fatal request errors
(validation, missing mare) apart from recoverable lookup failures.
"""

from typing import Optional


class HeritageError(Exception):
    """Root of all breeding-engine domain exceptions."""


class BreedingValidationError(HeritageError, ValueError):
    """The breeding request is missing required identifiers or is malformed."""


class HorseNotFoundError(HeritageError, LookupError):
    """A horse the engine cannot proceed without does not exist."""

    def __init__(self, message: str, horse_id: Optional[int] = None) -> None:
        super().__init__(message)
        self.horse_id = horse_id


class CollaboratorError(HeritageError):
    """A horse or competition lookup failed."""


class CatalogError(HeritageError):
    """Invalid trait rule catalog (duplicate names, bad probabilities)."""
