"""At-birth epigenetic trait assignment.

Entry point of the engine. For one breeding pair it:
1. validates the request (both parent ids required),
2. loads the mare and builds the condition snapshot,
3. runs inbreeding detection and lineage analysis (in parallel by default),
4. evaluates the trait catalog with an invocation-scoped RNG.

Lookup failures during step 3 never block the birth. They are logged and
replaced by the conservative defaults (no inbreeding, no specialization).
Only a bad request or a missing mare is reported to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Mapping, Optional, Tuple, Union

from heritage.config.engine_config import EngineConfig
from heritage.exceptions import BreedingValidationError, CollaboratorError, HorseNotFoundError
from heritage.lineage.inbreeding import InbreedingDetector
from heritage.lineage.specialization import LineageSpecializationAnalyzer
from heritage.lineage.walker import AncestorWalker
from heritage.models import (
    BirthTraitsOutcome,
    BreedingAnalysis,
    HorseId,
    HorseRecord,
    InbreedingResult,
    LineageAnalysis,
)
from heritage.protocols import CompetitionLookup, HorseLookup, RandomSource
from heritage.result import Result
from heritage.schemas import BreedingRequest, coerce_breeding_request
from heritage.traits.conditions import evaluate_conditions
from heritage.traits.rule_engine import TraitRuleEngine
from heritage.util.rng import invocation_rng

logger = logging.getLogger(__name__)

MISSING_PARENTS_MESSAGE = "Both sireId and damId are required"

BreedingData = Union[BreedingRequest, Mapping[str, Any]]


class EpigeneticTraitEngine:
    """Single owner of the at-birth trait rules.

    Holds no per-birth state; one instance can serve concurrent births.
    """

    def __init__(
        self,
        horses: HorseLookup,
        competitions: CompetitionLookup,
        config: Optional[EngineConfig] = None,
        rule_engine: Optional[TraitRuleEngine] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self._horses = horses
        self._competitions = competitions
        self._rule_engine = rule_engine or TraitRuleEngine()

    async def apply_at_birth(
        self,
        breeding_data: BreedingData,
        rng: Optional[RandomSource] = None,
    ) -> BirthTraitsOutcome:
        """Assign heritable traits to a foal.

        Args:
            breeding_data: Parent ids plus optional mare stress / feed quality
            rng: Random source for this birth; a fresh generator seeded with
                ``config.seed`` is used when omitted

        Returns:
            The applied traits and the evidence they were drawn from

        Raises:
            BreedingValidationError: Missing parent ids or malformed data
            HorseNotFoundError: The dam does not exist
            CollaboratorError: The dam could not be loaded
        """
        request = coerce_breeding_request(breeding_data)
        if not request.has_parents:
            raise BreedingValidationError(MISSING_PARENTS_MESSAGE)

        sire_id, dam_id = request.sire_id, request.dam_id
        mare = await self._load_mare(dam_id)
        conditions = evaluate_conditions(mare, request.mare_stress, request.feed_quality)

        inbreeding_result, lineage_result = await self._analyze_pair(sire_id, dam_id)

        inbreeding = inbreeding_result.unwrap_or(InbreedingResult.none())
        if inbreeding_result.is_err():
            logger.error(
                "Inbreeding analysis failed for sire %s / dam %s: %s",
                sire_id,
                dam_id,
                inbreeding_result.error,
            )

        lineage = lineage_result.unwrap_or(LineageAnalysis.empty())
        if lineage_result.is_err():
            logger.error(
                "Lineage analysis failed for sire %s / dam %s: %s",
                sire_id,
                dam_id,
                lineage_result.error,
            )

        analysis = BreedingAnalysis(
            inbreeding=inbreeding,
            lineage=lineage,
            conditions=conditions,
            inbreeding_failure=inbreeding_result.error,
            lineage_failure=lineage_result.error,
        )

        traits = self._rule_engine.apply(
            conditions,
            lineage,
            inbreeding,
            rng=invocation_rng(rng, self.config.seed),
        )

        logger.info(
            "Foal of sire %s / dam %s: %d positive, %d negative traits",
            sire_id,
            dam_id,
            len(traits.positive),
            len(traits.negative),
        )
        return BirthTraitsOutcome(traits=traits, breeding_analysis=analysis)

    async def _load_mare(self, dam_id: HorseId) -> HorseRecord:
        try:
            mare = await self._horses.get_horse_by_id(dam_id)
        except Exception as e:
            raise CollaboratorError(f"Could not load mare {dam_id}: {e}") from e
        if mare is None:
            raise HorseNotFoundError(f"Mare with ID {dam_id} not found", horse_id=dam_id)
        return mare

    async def _analyze_pair(
        self, sire_id: HorseId, dam_id: HorseId
    ) -> Tuple[Result[InbreedingResult, str], Result[LineageAnalysis, str]]:
        lineage_config = self.config.lineage
        walker = AncestorWalker(self._horses, lineage_config.max_depth)
        detector = InbreedingDetector(walker)
        analyzer = LineageSpecializationAnalyzer(
            walker,
            self._competitions,
            specialization_threshold=lineage_config.specialization_threshold,
            min_contributing_ancestors=lineage_config.min_contributing_ancestors,
        )

        if self.config.concurrent_analysis:
            return await asyncio.gather(
                detector.detect(sire_id, dam_id), analyzer.analyze(sire_id, dam_id)
            )
        return await detector.detect(sire_id, dam_id), await analyzer.analyze(sire_id, dam_id)


async def apply_epigenetic_traits_at_birth(
    breeding_data: BreedingData,
    horses: HorseLookup,
    competitions: CompetitionLookup,
    rng: Optional[RandomSource] = None,
    config: Optional[EngineConfig] = None,
) -> BirthTraitsOutcome:
    """Convenience wrapper around :meth:`EpigeneticTraitEngine.apply_at_birth`."""
    engine = EpigeneticTraitEngine(horses, competitions, config=config)
    return await engine.apply_at_birth(breeding_data, rng=rng)
