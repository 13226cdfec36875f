"""Discipline specialization across a foal's combined ancestry.

Competition results of every ancestor on both sides are pooled and tallied
per discipline. The lineage counts as specialized when one discipline holds
a clear majority of the pooled results and enough distinct ancestors
contributed results for that majority to mean something.
"""

from __future__ import annotations

import asyncio
import logging
from collections import Counter
from typing import Optional

from heritage.config.engine_config import validate_specialization_bounds
from heritage.config.lineage import MIN_CONTRIBUTING_ANCESTORS, SPECIALIZATION_THRESHOLD
from heritage.lineage.walker import AncestorWalker
from heritage.models import AncestorSet, HorseId, LineageAnalysis
from heritage.protocols import CompetitionLookup
from heritage.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class LineageSpecializationAnalyzer:
    """Tallies ancestral competition results and finds the dominant discipline."""

    def __init__(
        self,
        walker: AncestorWalker,
        competitions: CompetitionLookup,
        specialization_threshold: float = SPECIALIZATION_THRESHOLD,
        min_contributing_ancestors: int = MIN_CONTRIBUTING_ANCESTORS,
    ):
        validate_specialization_bounds(specialization_threshold, min_contributing_ancestors)
        self._walker = walker
        self._competitions = competitions
        self.specialization_threshold = specialization_threshold
        self.min_contributing_ancestors = min_contributing_ancestors

    async def analyze(self, sire_id: HorseId, dam_id: HorseId) -> Result[LineageAnalysis, str]:
        """Analyze the combined ancestry of a breeding pair.

        Returns:
            Ok(LineageAnalysis), or Err(reason) if any ancestry or competition
            lookup failed.
        """
        sire_side, dam_side = await asyncio.gather(
            self._walker.walk(sire_id), self._walker.walk(dam_id)
        )
        ancestors = sire_side.union(dam_side)
        if ancestors.failure:
            return Err(f"ancestry incomplete: {ancestors.failure}")

        try:
            return Ok(await self._tally(ancestors))
        except Exception as e:
            return Err(f"competition lookup failed: {type(e).__name__}: {e}")

    async def _tally(self, ancestors: AncestorSet) -> LineageAnalysis:
        counts: Counter = Counter()
        total = 0
        contributing = 0

        for ancestor in ancestors:
            records = await self._competitions.find_competition_results([ancestor.id])
            contributed = False
            for record in records:
                discipline = (record.discipline or "").strip()
                if not discipline:
                    logger.debug("Skipping result without discipline for ancestor %s", ancestor.id)
                    continue
                counts[discipline] += 1
                total += 1
                contributed = True
            if contributed:
                contributing += 1

        return self._summarize(counts, total, contributing)

    def _summarize(self, counts: Counter, total: int, contributing: int) -> LineageAnalysis:
        if total == 0:
            return LineageAnalysis.empty()

        # Counter.most_common keeps insertion order among equal counts,
        # so ties go to the discipline tallied first
        top_discipline, top_count = counts.most_common(1)[0]
        strength = top_count / total

        specialized = (
            strength > self.specialization_threshold
            and contributing >= self.min_contributing_ancestors
        )
        specialized_discipline: Optional[str] = top_discipline if specialized else None

        if specialized:
            logger.debug(
                "Lineage specialized in %s (%.2f of %d results, %d ancestors)",
                top_discipline,
                strength,
                total,
                contributing,
            )

        return LineageAnalysis(
            discipline_specialization=specialized,
            specialized_discipline=specialized_discipline,
            specialization_strength=strength,
            total_competitions=total,
            discipline_counts=tuple(counts.items()),
            contributing_ancestors=contributing,
        )
