"""
Neuron population descriptors used by plasticity rules.
"""

from __future__ import annotations

from .polarity import Polarity

__all__ = [
    "Polarity",
]
