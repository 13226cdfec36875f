"""Pytest configuration and fixtures for trait engine tests."""

import pytest

from tests.fakes.fake_stable import FakeStable
from tests.fakes.sequence_rng import SequenceRNG


@pytest.fixture
def stable():
    """Empty in-memory stable; tests add the horses they need."""
    return FakeStable()


@pytest.fixture
def stable_with_mare():
    """Stable holding sire 1 and dam 2 with no known ancestry."""
    stable = FakeStable()
    stable.add_horse(1, "Sire")
    stable.add_horse(
        2,
        "Dam",
        stress_level=15,
        bond_score=85,
        health_status="Excellent",
        total_earnings=100_000,
    )
    return stable


@pytest.fixture
def scripted_rng():
    """Factory for RNGs that return a fixed draw sequence."""

    def _make(*values, fallback=0.99):
        return SequenceRNG(values, fallback=fallback)

    return _make
