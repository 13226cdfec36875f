"""Structural checks for the collaborator protocols."""

import random

from tests.fakes.fake_stable import FakeStable
from tests.fakes.sequence_rng import SequenceRNG

from heritage.protocols import CompetitionLookup, HorseLookup, RandomSource


def test_fake_stable_satisfies_both_lookups():
    stable = FakeStable()

    assert isinstance(stable, HorseLookup)
    assert isinstance(stable, CompetitionLookup)


def test_random_sources():
    assert isinstance(random.Random(1), RandomSource)
    assert isinstance(SequenceRNG([0.5]), RandomSource)


def test_unrelated_objects_do_not_conform():
    assert not isinstance(object(), HorseLookup)
    assert not isinstance("stable", RandomSource)
