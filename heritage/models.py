"""Value objects exchanged between the engine and its callers.

Everything here is built fresh for one birth and discarded afterwards.
Caller-facing ``to_dict`` payloads use the camelCase keys the breeding
workflow consumes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
)

from heritage.config.lineage import MIN_CONTRIBUTING_ANCESTORS, SPECIALIZATION_THRESHOLD

if TYPE_CHECKING:
    from heritage.traits.conditions import ConditionSnapshot

HorseId = int


@dataclass(frozen=True)
class HorseRef:
    """A node in the ancestry graph."""

    id: HorseId
    name: str = ""
    sire_id: Optional[HorseId] = None
    dam_id: Optional[HorseId] = None

    def parent_ids(self) -> List[HorseId]:
        """Known parent ids, sire first."""
        return [pid for pid in (self.sire_id, self.dam_id) if pid is not None]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "sireId": self.sire_id,
            "damId": self.dam_id,
        }


@dataclass(frozen=True)
class HorseRecord(HorseRef):
    """Full horse snapshot, including the persisted condition fields.

    Only the mare's record is read this way; ancestors are plain refs.
    """

    stress_level: Optional[float] = None
    bond_score: Optional[float] = None
    health_status: Optional[str] = None
    total_earnings: Optional[float] = None


@dataclass(frozen=True)
class CompetitionRecord:
    """One historical competition result."""

    discipline: str
    placement: str
    horse_id: Optional[HorseId] = None


class AncestorSet:
    """Ancestors keyed by id, kept in discovery order.

    ``failure`` is set when a lookup cut the walk short; the ancestors found
    before that point are still present.
    """

    def __init__(
        self,
        ancestors: Iterable[HorseRef] = (),
        failure: Optional[str] = None,
    ) -> None:
        self._by_id: Dict[HorseId, HorseRef] = {}
        for ancestor in ancestors:
            self.add(ancestor)
        self.failure = failure

    def add(self, ancestor: HorseRef) -> bool:
        """Add an ancestor; returns False if the id was already present."""
        if ancestor.id in self._by_id:
            return False
        self._by_id[ancestor.id] = ancestor
        return True

    @property
    def complete(self) -> bool:
        return self.failure is None

    def ids(self) -> List[HorseId]:
        return list(self._by_id)

    def union(self, other: "AncestorSet") -> "AncestorSet":
        """Ancestors of both sets, this set's order first."""
        failure = self.failure or other.failure
        return AncestorSet(list(self) + list(other), failure=failure)

    def intersection(self, other: "AncestorSet") -> List[HorseRef]:
        """Ancestors present in both sets, in this set's order."""
        return [ancestor for ancestor in self if ancestor.id in other]

    def __contains__(self, item: object) -> bool:
        if isinstance(item, HorseRef):
            return item.id in self._by_id
        return item in self._by_id

    def __iter__(self) -> Iterator[HorseRef]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)

    def __repr__(self) -> str:
        suffix = f", failure={self.failure!r}" if self.failure else ""
        return f"<AncestorSet with {len(self)} ancestors{suffix}>"


@dataclass(frozen=True)
class InbreedingResult:
    """Outcome of comparing sire-side and dam-side ancestry."""

    inbreeding_detected: bool
    common_ancestors: Tuple[HorseRef, ...] = ()

    def __post_init__(self) -> None:
        if self.inbreeding_detected != bool(self.common_ancestors):
            raise ValueError(
                "inbreeding_detected must be True exactly when common ancestors exist"
            )

    @classmethod
    def from_common(cls, common: Iterable[HorseRef]) -> "InbreedingResult":
        ancestors = tuple(common)
        return cls(inbreeding_detected=bool(ancestors), common_ancestors=ancestors)

    @classmethod
    def none(cls) -> "InbreedingResult":
        """No shared ancestors; also the fallback when ancestry is unknown."""
        return cls(inbreeding_detected=False, common_ancestors=())

    def common_ancestor_ids(self) -> List[HorseId]:
        return [ancestor.id for ancestor in self.common_ancestors]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inbreedingDetected": self.inbreeding_detected,
            "commonAncestors": [a.to_dict() for a in self.common_ancestors],
        }


@dataclass(frozen=True)
class LineageAnalysis:
    """Discipline specialization across the combined ancestry.

    Attributes:
        discipline_specialization: Whether one discipline dominates the lineage
        specialized_discipline: The dominant discipline, only when specialized
        specialization_strength: Share of all results held by the top discipline
        total_competitions: Number of results found across all ancestors
        discipline_counts: Results per discipline, in first-encountered order
        contributing_ancestors: Ancestors with at least one result
    """

    discipline_specialization: bool = False
    specialized_discipline: Optional[str] = None
    specialization_strength: float = 0.0
    total_competitions: int = 0
    discipline_counts: Tuple[Tuple[str, int], ...] = ()
    contributing_ancestors: int = 0

    def __post_init__(self) -> None:
        if not 0.0 <= self.specialization_strength <= 1.0:
            raise ValueError(
                f"specialization_strength out of range: {self.specialization_strength}"
            )
        if self.total_competitions < 0:
            raise ValueError("total_competitions cannot be negative")
        if self.discipline_specialization != (self.specialized_discipline is not None):
            raise ValueError(
                "specialized_discipline must be set exactly when specialization is detected"
            )
        if self.discipline_specialization and (
            self.specialization_strength <= SPECIALIZATION_THRESHOLD
            or self.contributing_ancestors < MIN_CONTRIBUTING_ANCESTORS
        ):
            raise ValueError(
                f"Specialization needs strength above {SPECIALIZATION_THRESHOLD} and at least "
                f"{MIN_CONTRIBUTING_ANCESTORS} contributing ancestors, got "
                f"{self.specialization_strength:.2f} from {self.contributing_ancestors}"
            )

    @classmethod
    def empty(cls) -> "LineageAnalysis":
        """No specialization; also the fallback when lineage lookups fail."""
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "disciplineSpecialization": self.discipline_specialization,
            "specializedDiscipline": self.specialized_discipline,
            "specializationStrength": self.specialization_strength,
            "totalCompetitions": self.total_competitions,
            "disciplineCounts": dict(self.discipline_counts),
            "contributingAncestors": self.contributing_ancestors,
        }


class TraitPolarity(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


# (conditions, lineage, inbreeding) -> bool
TraitPredicate = Callable[["ConditionSnapshot", LineageAnalysis, InbreedingResult], bool]


@dataclass(frozen=True)
class TraitRule:
    """One entry of the trait catalog.

    The trait is applied when ``predicate`` holds and a uniform draw in
    ``[0, 1)`` is strictly below ``probability``.
    """

    name: str
    polarity: TraitPolarity
    probability: float
    predicate: TraitPredicate = field(compare=False)
    description: str = ""

    def evaluate(
        self,
        conditions: "ConditionSnapshot",
        lineage: LineageAnalysis,
        inbreeding: InbreedingResult,
    ) -> bool:
        """Whether the rule is eligible to fire for this birth."""
        return bool(self.predicate(conditions, lineage, inbreeding))

    def accepts(self, draw: float) -> bool:
        return draw < self.probability


@dataclass(frozen=True)
class TraitAssignment:
    """Traits applied to a foal, in catalog order."""

    positive: Tuple[str, ...] = ()
    negative: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        overlap = set(self.positive) & set(self.negative)
        if overlap:
            raise ValueError(f"Traits cannot be both positive and negative: {sorted(overlap)}")

    @property
    def all_traits(self) -> Tuple[str, ...]:
        return self.positive + self.negative

    def to_dict(self) -> Dict[str, Any]:
        return {"positive": list(self.positive), "negative": list(self.negative)}


@dataclass(frozen=True)
class BreedingAnalysis:
    """Evidence the trait rules were evaluated against.

    ``inbreeding_failure`` / ``lineage_failure`` carry the reason an analysis
    fell back to its conservative default, or None when it completed.
    """

    inbreeding: InbreedingResult
    lineage: LineageAnalysis
    conditions: "ConditionSnapshot"
    inbreeding_failure: Optional[str] = None
    lineage_failure: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.inbreeding_failure is not None or self.lineage_failure is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "inbreeding": self.inbreeding.to_dict(),
            "lineage": self.lineage.to_dict(),
            "conditions": self.conditions.to_dict(),
        }


@dataclass(frozen=True)
class BirthTraitsOutcome:
    """Return value of the at-birth entry point."""

    traits: TraitAssignment
    breeding_analysis: BreedingAnalysis

    def to_dict(self) -> Dict[str, Any]:
        return {
            "traits": self.traits.to_dict(),
            "breedingAnalysis": self.breeding_analysis.to_dict(),
        }
