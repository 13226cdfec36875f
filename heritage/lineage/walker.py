"""Breadth-first ancestry walk over parent links.

Pedigrees should be acyclic, but the records come from a mutable store and
can be wrong (a horse listed as its own grandsire, two paths to the same
ancestor). The walk keeps a visited-id set so every id is requested at most
once, and stops after ``max_depth`` generations.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from heritage.config.lineage import DEFAULT_ANCESTOR_DEPTH
from heritage.models import AncestorSet, HorseId, HorseRef
from heritage.protocols import HorseLookup

logger = logging.getLogger(__name__)


class AncestorWalker:
    """Collects the ancestors of a horse, one generation per lookup."""

    def __init__(self, horses: HorseLookup, max_depth: int = DEFAULT_ANCESTOR_DEPTH):
        self._horses = horses
        self.max_depth = max_depth

    @property
    def horses(self) -> HorseLookup:
        return self._horses

    async def walk(self, start_id: HorseId, max_depth: Optional[int] = None) -> AncestorSet:
        """Return the ancestors of ``start_id`` up to ``max_depth`` generations.

        The start horse itself is never included. Generation 1 is its
        parents. A lookup failure ends the walk: the ancestors found so far
        are returned with ``failure`` set rather than raising.
        """
        depth = self.max_depth if max_depth is None else max_depth
        ancestors = AncestorSet()
        if depth <= 0:
            return ancestors

        visited = {start_id}

        try:
            start_records = await self._horses.find_parent_records([start_id])
        except Exception as e:
            return self._abort(start_id, ancestors, e)

        frontier = _next_generation(
            [rec for rec in start_records if rec.id == start_id], visited
        )
        generation = 0

        while frontier and generation < depth:
            generation += 1
            visited.update(frontier)

            try:
                records = await self._horses.find_parent_records(frontier)
            except Exception as e:
                return self._abort(start_id, ancestors, e)

            found = []
            for record in records:
                # Stores may echo ids we did not ask for; only keep requested ones
                if record.id not in visited or record.id == start_id:
                    continue
                if ancestors.add(record):
                    found.append(record)

            missing = set(frontier) - {rec.id for rec in found}
            if missing:
                logger.debug(
                    "Ancestor walk from %s: no records for %s at generation %d",
                    start_id,
                    sorted(missing),
                    generation,
                )

            frontier = _next_generation(found, visited)

        return ancestors

    def _abort(self, start_id: HorseId, ancestors: AncestorSet, error: Exception) -> AncestorSet:
        ancestors.failure = f"{type(error).__name__}: {error}"
        logger.warning(
            "Ancestor walk from %s aborted after %d ancestors: %s",
            start_id,
            len(ancestors),
            ancestors.failure,
        )
        return ancestors


def _next_generation(records: Sequence[HorseRef], visited: set) -> List[HorseId]:
    """Unvisited parent ids of ``records``, deduplicated, sire before dam."""
    next_ids: List[HorseId] = []
    for record in records:
        for parent_id in record.parent_ids():
            if parent_id not in visited and parent_id not in next_ids:
                next_ids.append(parent_id)
    return next_ids
