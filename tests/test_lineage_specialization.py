"""Tests for discipline specialization across the combined ancestry."""

import pytest

from heritage.config.engine_config import LineageConfig
from heritage.lineage.specialization import LineageSpecializationAnalyzer
from heritage.lineage.walker import AncestorWalker
from heritage.models import LineageAnalysis


def _analyzer(stable, **kwargs):
    return LineageSpecializationAnalyzer(AncestorWalker(stable), stable, **kwargs)


@pytest.fixture
def racing_family(stable):
    """Sire 1 with four ancestors; 4 of their 5 results are Racing."""
    stable.add_horse(1, "Sire", sire_id=10, dam_id=11)
    stable.add_horse(2, "Dam")
    stable.add_horse(10, "Ancestor1", sire_id=12, dam_id=13)
    stable.add_horse(11, "Ancestor2")
    stable.add_horse(12, "Ancestor3")
    stable.add_horse(13, "Ancestor4")
    stable.add_results(10, "Racing")
    stable.add_results(11, "Racing")
    stable.add_results(12, "Racing", "Dressage")
    stable.add_results(13, "Racing")
    return stable


@pytest.mark.asyncio
async def test_dominant_discipline_is_detected(racing_family):
    lineage = (await _analyzer(racing_family).analyze(1, 2)).unwrap()

    assert lineage.discipline_specialization
    assert lineage.specialized_discipline == "Racing"
    assert lineage.specialization_strength == pytest.approx(0.8)
    assert lineage.total_competitions == 5
    assert lineage.contributing_ancestors == 4
    assert dict(lineage.discipline_counts) == {"Racing": 4, "Dressage": 1}


@pytest.mark.asyncio
async def test_results_are_queried_once_per_ancestor(racing_family):
    await _analyzer(racing_family).analyze(1, 2)

    assert racing_family.competition_lookups == [[10], [11], [12], [13]]


@pytest.mark.asyncio
async def test_diverse_history_is_not_specialized(stable):
    stable.add_horse(1, sire_id=10, dam_id=11)
    stable.add_horse(2, sire_id=20)
    for horse_id in (10, 11, 20):
        stable.add_horse(horse_id)
    stable.add_results(10, "Racing", "Racing")
    stable.add_results(11, "Dressage", "Dressage")
    stable.add_results(20, "Show Jumping", "Show Jumping")

    lineage = (await _analyzer(stable).analyze(1, 2)).unwrap()

    assert not lineage.discipline_specialization
    assert lineage.specialized_discipline is None
    assert lineage.specialization_strength == pytest.approx(1 / 3)
    assert lineage.total_competitions == 6


@pytest.mark.asyncio
async def test_one_prolific_ancestor_is_not_a_specialized_lineage(stable):
    stable.add_horse(1, sire_id=10, dam_id=11)
    stable.add_horse(2)
    stable.add_horse(10)
    stable.add_horse(11)
    stable.add_results(10, *["Racing"] * 9)
    stable.add_results(11, "Dressage")

    lineage = (await _analyzer(stable).analyze(1, 2)).unwrap()

    assert lineage.specialization_strength == pytest.approx(0.9)
    assert lineage.contributing_ancestors == 2
    assert not lineage.discipline_specialization
    assert lineage.specialized_discipline is None


@pytest.mark.asyncio
async def test_exactly_sixty_percent_is_not_specialized(stable):
    stable.add_horse(1, sire_id=10, dam_id=11)
    stable.add_horse(2, sire_id=20, dam_id=21)
    for horse_id in (10, 11, 20, 21):
        stable.add_horse(horse_id)
    stable.add_results(10, "Racing")
    stable.add_results(11, "Racing")
    stable.add_results(20, "Racing")
    stable.add_results(21, "Dressage", "Dressage")

    lineage = (await _analyzer(stable).analyze(1, 2)).unwrap()

    assert lineage.specialization_strength == pytest.approx(0.6)
    assert not lineage.discipline_specialization


@pytest.mark.asyncio
async def test_ancestors_from_both_sides_are_pooled(stable):
    stable.add_horse(1, sire_id=10)
    stable.add_horse(2, sire_id=20, dam_id=21)
    for horse_id in (10, 20, 21):
        stable.add_horse(horse_id)
        stable.add_results(horse_id, "Endurance")

    lineage = (await _analyzer(stable).analyze(1, 2)).unwrap()

    assert lineage.specialized_discipline == "Endurance"
    assert lineage.contributing_ancestors == 3


@pytest.mark.asyncio
async def test_shared_ancestor_is_counted_once(stable):
    stable.add_horse(1, sire_id=100, dam_id=11)
    stable.add_horse(2, sire_id=100, dam_id=21)
    for horse_id in (100, 11, 21):
        stable.add_horse(horse_id)
    stable.add_results(100, "Racing", "Racing")

    lineage = (await _analyzer(stable).analyze(1, 2)).unwrap()

    assert lineage.total_competitions == 2
    assert stable.competition_lookups.count([100]) == 1


@pytest.mark.asyncio
async def test_tie_goes_to_first_tallied_discipline(stable):
    stable.add_horse(1, sire_id=10, dam_id=11)
    stable.add_horse(2)
    stable.add_horse(10)
    stable.add_horse(11)
    stable.add_results(10, "Dressage", "Racing")
    stable.add_results(11, "Racing", "Dressage")

    lineage = (await _analyzer(stable).analyze(1, 2)).unwrap()

    assert lineage.discipline_counts[0] == ("Dressage", 2)
    assert lineage.specialization_strength == pytest.approx(0.5)


@pytest.mark.parametrize("overrides", [
    {"specialization_threshold": 0.4},
    {"min_contributing_ancestors": 1},
])
def test_looser_bounds_are_rejected(stable, overrides):
    with pytest.raises(ValueError):
        _analyzer(stable, **overrides)

    with pytest.raises(ValueError):
        LineageConfig(**overrides)


@pytest.mark.asyncio
async def test_stricter_bounds_are_honoured(racing_family):
    analyzer = _analyzer(racing_family, specialization_threshold=0.85, min_contributing_ancestors=4)

    lineage = (await analyzer.analyze(1, 2)).unwrap()

    assert lineage.specialization_strength == pytest.approx(0.8)
    assert not lineage.discipline_specialization
    assert lineage.specialized_discipline is None


@pytest.mark.asyncio
async def test_blank_disciplines_are_skipped(stable):
    stable.add_horse(1, sire_id=10)
    stable.add_horse(2)
    stable.add_horse(10)
    stable.add_results(10, "Racing", "  ", "")

    lineage = (await _analyzer(stable).analyze(1, 2)).unwrap()

    assert lineage.total_competitions == 1


@pytest.mark.asyncio
async def test_no_history_gives_empty_analysis(stable):
    stable.add_horse(1, sire_id=10)
    stable.add_horse(2)
    stable.add_horse(10)

    lineage = (await _analyzer(stable).analyze(1, 2)).unwrap()

    assert lineage == LineageAnalysis.empty()
    assert lineage.total_competitions == 0
    assert lineage.specialization_strength == 0.0


@pytest.mark.asyncio
async def test_competition_lookup_failure_is_err(racing_family):
    racing_family.competition_error = ConnectionError("Database connection failed")

    result = await _analyzer(racing_family).analyze(1, 2)

    assert result.is_err()
    assert "competition lookup failed" in result.error


@pytest.mark.asyncio
async def test_ancestry_failure_is_err(racing_family):
    racing_family.parent_lookup_error = ConnectionError("Database connection failed")

    result = await _analyzer(racing_family).analyze(1, 2)

    assert result.is_err()
    assert result.unwrap_or(LineageAnalysis.empty()) == LineageAnalysis.empty()
    assert racing_family.competition_lookups == []
