"""Tests for the polarity-keyed STDP preset table."""

import itertools
import random

import pytest

from synapto.errors import InvalidParameterError

from synapto.components.neurons.polarity import Polarity
from synapto.learning.stdp_presets import (
    EE_PRESET,
    EI_PRESET,
    IE_PRESET,
    II_PRESET,
    STDP_PRESETS,
    STDPPreset,
    get_preset,
    get_stdp_preset,
    list_presets,
    resolve_preset,
)

E = Polarity.EXCITATORY
I = Polarity.INHIBITORY

DOCUMENTED = {
    (E, E): (5.0, 1.0, 25.0, 100.0),
    (E, I): (1.6, 1.0, 25.0, 100.0),
    (I, E): (1.0, 1.2, 20.0, 20.0),
    (I, I): (1.0, 1.0, 20.0, 20.0),
}


class TestPresetConstants:
    """The four literal presets match their documented values."""

    def test_literal_values(self):
        assert EE_PRESET.as_tuple() == DOCUMENTED[(E, E)]
        assert EI_PRESET.as_tuple() == DOCUMENTED[(E, I)]
        assert IE_PRESET.as_tuple() == DOCUMENTED[(I, E)]
        assert II_PRESET.as_tuple() == DOCUMENTED[(I, I)]

    def test_presets_are_distinct(self):
        tuples = [p.as_tuple() for p in STDP_PRESETS.values()]
        assert len(set(tuples)) == 4

    def test_presets_are_frozen(self):
        with pytest.raises(AttributeError):
            EE_PRESET.w_plus = 2.0

    def test_time_constants_positive(self):
        for preset in STDP_PRESETS.values():
            assert preset.tau_plus > 0
            assert preset.tau_minus > 0

    def test_registry_covers_every_pair(self):
        assert set(STDP_PRESETS) == set(itertools.product(Polarity, Polarity))
        assert all(isinstance(p, STDPPreset) for p in STDP_PRESETS.values())


class TestResolvePreset:
    """resolve_preset is total and pure over the four polarity pairs."""

    @pytest.mark.parametrize("pair", list(DOCUMENTED))
    def test_matches_documented(self, pair):
        assert resolve_preset(*pair) == DOCUMENTED[pair]

    def test_independent_of_call_order(self):
        pairs = list(DOCUMENTED) * 5
        random.shuffle(pairs)
        for pair in pairs:
            assert resolve_preset(*pair) == DOCUMENTED[pair]

    def test_rejects_non_polarity(self):
        with pytest.raises(InvalidParameterError, match="source must be a Polarity"):
            get_preset(True, Polarity.EXCITATORY)


class TestPresetLookupByCode:
    """Short-code lookup and listing helpers."""

    @pytest.mark.parametrize("code,preset", [
        ("EE", EE_PRESET), ("EI", EI_PRESET), ("IE", IE_PRESET), ("II", II_PRESET),
    ])
    def test_get_stdp_preset(self, code, preset):
        assert get_stdp_preset(code) is preset

    def test_code_is_case_insensitive(self):
        assert get_stdp_preset("ie") is IE_PRESET

    def test_unknown_code(self):
        with pytest.raises(KeyError, match="Available presets: EE, EI, IE, II"):
            get_stdp_preset("XE")

    def test_list_presets(self):
        listing = list_presets()
        assert set(listing) == {"EE", "EI", "IE", "II"}
        assert listing["EE"] == EE_PRESET.description
