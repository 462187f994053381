"""
Neuron population polarity.

A population's polarity describes the sign of its influence on downstream
neurons. Plasticity presets are keyed by the (source, target) polarity pair
of a projection.
"""

from __future__ import annotations

from enum import Enum


class Polarity(Enum):
    """Sign contribution of a neuron population."""

    EXCITATORY = "excitatory"
    INHIBITORY = "inhibitory"

    @classmethod
    def from_bool(cls, is_excitatory: bool) -> Polarity:
        """Map a boolean population flag (excitatory=True) to a polarity."""
        return cls.EXCITATORY if is_excitatory else cls.INHIBITORY

    @property
    def short_code(self) -> str:
        """Single-letter code used in preset keys ("E" or "I")."""
        return "E" if self is Polarity.EXCITATORY else "I"
