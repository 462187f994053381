"""
SYNAPTO - Spike-timing-dependent plasticity for spiking network simulators

Quick Start:
============

    from synapto import Polarity, StandardSTDP

    rule = StandardSTDP.from_preset(Polarity.EXCITATORY, Polarity.INHIBITORY, eta=0.01)

    # On a postsynaptic spike
    dw = rule.post_trigger(last_post_spike_time, last_arrival_time)

    # On a presynaptic spike (caller picks the convention)
    dw = rule.pre_trigger_hebb(last_post_spike_time, last_arrival_time)

Internal code should use explicit imports for clarity:

    from synapto.learning.stdp import StandardSTDP, PlasticityRegime
    from synapto.learning.stdp_presets import resolve_preset
    from synapto.config.stdp_config import STDPConfig
"""

__version__ = "0.1.0"

# Configuration
from synapto.config import GlobalConfig, BaseConfig
from synapto.config.stdp_config import STDPConfig

# Errors
from synapto.errors import (
    SynaptoError,
    ConfigurationError,
    InvalidParameterError,
    ShapeMismatchError,
)

# Components
from synapto.components.neurons.polarity import Polarity

# Learning rules
from synapto.learning.stdp import StandardSTDP, PlasticityRegime, DEFAULT_REGIME
from synapto.learning.stdp_presets import (
    STDP_PRESETS,
    STDPPreset,
    get_stdp_preset,
    list_presets,
    resolve_preset,
)

# Utilities
from synapto.utils.core_utils import apply_weight_delta, clamp_weights

__all__ = [
    "__version__",
    # Configuration
    "GlobalConfig",
    "BaseConfig",
    "STDPConfig",
    # Errors
    "SynaptoError",
    "ConfigurationError",
    "InvalidParameterError",
    "ShapeMismatchError",
    # Components
    "Polarity",
    # Learning rules
    "StandardSTDP",
    "PlasticityRegime",
    "DEFAULT_REGIME",
    "STDP_PRESETS",
    "STDPPreset",
    "get_stdp_preset",
    "list_presets",
    "resolve_preset",
    # Utilities
    "apply_weight_delta",
    "clamp_weights",
]
