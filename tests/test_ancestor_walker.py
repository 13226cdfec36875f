"""Tests for the breadth-first ancestor walk."""

import pytest

from heritage.lineage.walker import AncestorWalker


def _three_generation_pedigree(stable):
    """Foal 1 <- (10, 11); 10 <- (20, 21); 11 <- (22, 23); 20 <- (30, None)."""
    stable.add_horse(1, "Foal", sire_id=10, dam_id=11)
    stable.add_horse(10, "Sire", sire_id=20, dam_id=21)
    stable.add_horse(11, "Dam", sire_id=22, dam_id=23)
    stable.add_horse(20, "Grandsire", sire_id=30)
    stable.add_horse(21, "Granddam")
    stable.add_horse(22, "Maternal grandsire")
    stable.add_horse(23, "Maternal granddam")
    stable.add_horse(30, "Great-grandsire")


@pytest.mark.asyncio
async def test_walk_collects_ancestors_in_generation_order(stable):
    _three_generation_pedigree(stable)

    ancestors = await AncestorWalker(stable).walk(1)

    assert ancestors.ids() == [10, 11, 20, 21, 22, 23, 30]
    assert ancestors.complete
    assert 1 not in ancestors


@pytest.mark.asyncio
async def test_walk_issues_one_batched_lookup_per_generation(stable):
    _three_generation_pedigree(stable)

    await AncestorWalker(stable).walk(1)

    assert stable.parent_lookups == [[1], [10, 11], [20, 21, 22, 23], [30]]


@pytest.mark.asyncio
async def test_walk_respects_max_depth(stable):
    _three_generation_pedigree(stable)
    walker = AncestorWalker(stable, max_depth=2)

    ancestors = await walker.walk(1)

    assert ancestors.ids() == [10, 11, 20, 21, 22, 23]
    assert 30 not in ancestors


@pytest.mark.asyncio
async def test_walk_depth_override_per_call(stable):
    _three_generation_pedigree(stable)

    ancestors = await AncestorWalker(stable, max_depth=5).walk(1, max_depth=1)

    assert ancestors.ids() == [10, 11]


@pytest.mark.asyncio
async def test_zero_depth_returns_empty_without_lookups(stable):
    _three_generation_pedigree(stable)

    ancestors = await AncestorWalker(stable).walk(1, max_depth=0)

    assert len(ancestors) == 0
    assert stable.parent_lookups == []


@pytest.mark.asyncio
async def test_unknown_start_horse_has_no_ancestors(stable):
    ancestors = await AncestorWalker(stable).walk(999)

    assert len(ancestors) == 0
    assert ancestors.complete


@pytest.mark.asyncio
async def test_shared_ancestor_through_two_paths_is_listed_once(stable):
    # 100 is both grandsire (via 10) and granddam's sire (via 11)
    stable.add_horse(1, sire_id=10, dam_id=11)
    stable.add_horse(10, sire_id=100)
    stable.add_horse(11, sire_id=100, dam_id=12)
    stable.add_horse(12, sire_id=100)
    stable.add_horse(100)

    ancestors = await AncestorWalker(stable).walk(1)

    assert ancestors.ids() == [10, 11, 100, 12]
    requested = [horse_id for batch in stable.parent_lookups for horse_id in batch]
    assert requested.count(100) == 1


@pytest.mark.asyncio
async def test_cyclic_pedigree_terminates(stable):
    # Malformed data: 10 is listed as its own grandsire and 1 as its own ancestor
    stable.add_horse(1, sire_id=10)
    stable.add_horse(10, sire_id=11)
    stable.add_horse(11, sire_id=10, dam_id=1)

    ancestors = await AncestorWalker(stable, max_depth=50).walk(1)

    assert ancestors.ids() == [10, 11]
    assert len(stable.parent_lookups) == 3


@pytest.mark.asyncio
async def test_missing_parent_record_ends_that_branch(stable):
    stable.add_horse(1, sire_id=10, dam_id=11)
    stable.add_horse(10, sire_id=20)
    stable.add_horse(20)
    # 11 is referenced but has no record

    ancestors = await AncestorWalker(stable).walk(1)

    assert ancestors.ids() == [10, 20]
    assert ancestors.complete


@pytest.mark.asyncio
async def test_lookup_failure_keeps_partial_ancestry(stable, caplog):
    _three_generation_pedigree(stable)
    stable.fail_parent_lookup_on = 3  # grandparents generation

    with caplog.at_level("WARNING"):
        ancestors = await AncestorWalker(stable).walk(1)

    assert ancestors.ids() == [10, 11]
    assert not ancestors.complete
    assert "Database connection failed" in ancestors.failure
    assert "aborted after 2 ancestors" in caplog.text


@pytest.mark.asyncio
async def test_failure_loading_start_horse_is_not_raised(stable):
    stable.parent_lookup_error = TimeoutError("lookup timed out")

    ancestors = await AncestorWalker(stable).walk(1)

    assert len(ancestors) == 0
    assert ancestors.failure == "TimeoutError: lookup timed out"
