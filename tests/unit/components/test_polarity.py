"""Tests for population polarity."""

from synapto.components.neurons.polarity import Polarity


class TestPolarity:
    """Tests for the Polarity enum."""

    def test_from_bool(self):
        """Boolean excitatory flag maps onto the enum."""
        assert Polarity.from_bool(True) is Polarity.EXCITATORY
        assert Polarity.from_bool(False) is Polarity.INHIBITORY

    def test_short_code(self):
        assert Polarity.EXCITATORY.short_code == "E"
        assert Polarity.INHIBITORY.short_code == "I"

    def test_lookup_by_value(self):
        """String values round-trip to members (used by configs)."""
        assert Polarity("excitatory") is Polarity.EXCITATORY
        assert Polarity("inhibitory") is Polarity.INHIBITORY
