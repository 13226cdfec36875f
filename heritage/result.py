"""Result type for analyses that may fail without aborting a birth.

Ancestry and lineage analyses depend on external lookups. A failed lookup
must degrade the breeding analysis, never block the foal, so those
analyses return a Result instead of raising:

    def detect(...) -> Result[InbreedingResult, str]:
        if sire_side.failure:
            return Err(f"sire ancestry incomplete: {sire_side.failure}")
        return Ok(InbreedingResult.from_common(shared))

The orchestrator decides what a failure turns into:

    inbreeding = result.unwrap_or(InbreedingResult.none())
    if result.is_err():
        logger.error("Inbreeding analysis failed: %s", result.error)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")  # Success value type
E = TypeVar("E")  # Error type


@dataclass(frozen=True)
class Ok(Generic[T]):
    """A completed analysis carrying its value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    @property
    def error(self) -> None:
        """Ok has no error, returns None."""
        return None

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True)
class Err(Generic[E]):
    """A failed analysis carrying the failure reason."""

    error: E

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> T:
        """Raises ValueError since Err has no success value.

        Don't call this without checking is_ok() first!
        """
        raise ValueError(f"Called unwrap on Err: {self.error}")

    def unwrap_or(self, default: T) -> T:
        return default

    @property
    def value(self) -> None:
        """Err has no value, returns None."""
        return None

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result = Union[Ok[T], Err[E]]
