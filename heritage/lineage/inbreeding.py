"""Shared-ancestor detection between a sire and a dam."""

from __future__ import annotations

import asyncio
import logging
from typing import List

from heritage.config.lineage import DEFAULT_ANCESTOR_DEPTH
from heritage.lineage.walker import AncestorWalker
from heritage.models import HorseId, HorseRef, InbreedingResult
from heritage.protocols import HorseLookup
from heritage.result import Err, Ok, Result

logger = logging.getLogger(__name__)


class InbreedingDetector:
    """Intersects the sire-side and dam-side ancestor sets."""

    def __init__(self, walker: AncestorWalker):
        self._walker = walker

    async def detect(self, sire_id: HorseId, dam_id: HorseId) -> Result[InbreedingResult, str]:
        """Find ancestors present on both sides of the pedigree.

        Each walk excludes its own start horse, so a parent bred back to its
        own offspring (sire appearing in the dam's ancestry) is only flagged
        through the parent's recorded ancestors, never through the parent
        itself.

        Returns:
            Ok(InbreedingResult) with common ancestors in sire-side order, or
            Err(reason) when either side's ancestry could not be loaded.
        """
        if sire_id == dam_id:
            return Ok(await self._self_overlap(sire_id))

        sire_side, dam_side = await asyncio.gather(
            self._walker.walk(sire_id), self._walker.walk(dam_id)
        )

        if sire_side.failure:
            return Err(f"sire {sire_id} ancestry incomplete: {sire_side.failure}")
        if dam_side.failure:
            return Err(f"dam {dam_id} ancestry incomplete: {dam_side.failure}")

        common = sire_side.intersection(dam_side)
        if common:
            logger.debug(
                "Sire %s and dam %s share ancestors %s",
                sire_id,
                dam_id,
                [ancestor.id for ancestor in common],
            )
        return Ok(InbreedingResult.from_common(common))

    async def _self_overlap(self, horse_id: HorseId) -> InbreedingResult:
        """Sire and dam are the same horse: every ancestor is shared.

        The horse heads the list, so the result reports inbreeding even when
        nothing further is known about its ancestry.
        """
        ancestors = await self._walker.walk(horse_id)
        try:
            horse = await self._walker.horses.get_horse_by_id(horse_id)
        except Exception as e:
            logger.warning("Lookup of self-mated parent %s failed: %s", horse_id, e)
            horse = None

        common: List[HorseRef] = [_as_ref(horse) if horse is not None else HorseRef(id=horse_id)]
        common.extend(ancestors)
        return InbreedingResult.from_common(common)


def _as_ref(horse: HorseRef) -> HorseRef:
    """Strip a full record down to its pedigree fields."""
    return HorseRef(id=horse.id, name=horse.name, sire_id=horse.sire_id, dam_id=horse.dam_id)


async def detect_inbreeding(
    horses: HorseLookup,
    sire_id: HorseId,
    dam_id: HorseId,
    max_depth: int = DEFAULT_ANCESTOR_DEPTH,
) -> InbreedingResult:
    """Detect inbreeding, falling back to "none detected" on lookup failure."""
    result = await InbreedingDetector(AncestorWalker(horses, max_depth)).detect(sire_id, dam_id)
    if result.is_err():
        logger.error(
            "Inbreeding analysis failed for sire %s / dam %s: %s", sire_id, dam_id, result.error
        )
    return result.unwrap_or(InbreedingResult.none())
