"""Collaborator contracts consumed by the engine.

The engine never talks to a database directly. Whatever persistence layer
the breeding workflow uses only has to satisfy these structural protocols;
no inheritance is required, which keeps test doubles trivial:

    class InMemoryStable:
        async def get_horse_by_id(self, horse_id): ...
        async def find_parent_records(self, ids): ...

    assert isinstance(InMemoryStable(), HorseLookup)

Protocol Hierarchy:
------------------
    HorseLookup - single-horse snapshot and batched parent-link lookup
    CompetitionLookup - historical competition results for ancestors
    RandomSource - uniform draws in [0, 1) (random.Random satisfies it)
"""

from typing import Optional, Protocol, Sequence, runtime_checkable

from heritage.models import CompetitionRecord, HorseId, HorseRecord, HorseRef


@runtime_checkable
class HorseLookup(Protocol):
    """Read access to horse records.

    Implementations may raise any exception on failure; the engine treats
    failures during ancestry analysis as recoverable.
    """

    async def get_horse_by_id(self, horse_id: HorseId) -> Optional[HorseRecord]:
        """Return the horse, or None when it does not exist."""
        ...

    async def find_parent_records(self, ids: Sequence[HorseId]) -> Sequence[HorseRef]:
        """Return the records for ``ids``; unknown ids are simply absent."""
        ...


@runtime_checkable
class CompetitionLookup(Protocol):
    """Read access to historical competition results."""

    async def find_competition_results(
        self, ancestor_ids: Sequence[HorseId]
    ) -> Sequence[CompetitionRecord]:
        ...


@runtime_checkable
class RandomSource(Protocol):
    """Anything that draws uniform floats in [0, 1)."""

    def random(self) -> float: ...
