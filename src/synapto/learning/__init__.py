"""
Learning rules for synaptic plasticity.

    from synapto.learning import StandardSTDP, PlasticityRegime
    from synapto.learning.stdp_presets import STDP_PRESETS, resolve_preset
"""

from __future__ import annotations

from .stdp import (
    DEFAULT_REGIME,
    PlasticityRegime,
    StandardSTDP,
)
from .stdp_presets import (
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

__all__ = [
    # STDP rule
    "DEFAULT_REGIME",
    "PlasticityRegime",
    "StandardSTDP",
    # STDP presets
    "EE_PRESET",
    "EI_PRESET",
    "IE_PRESET",
    "II_PRESET",
    "STDP_PRESETS",
    "STDPPreset",
    "get_preset",
    "get_stdp_preset",
    "list_presets",
    "resolve_preset",
]
