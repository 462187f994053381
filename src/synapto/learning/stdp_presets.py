"""
Standard STDP Parameter Presets for Projection Polarity Pairs.

Every projection connects a source population to a target population, and
each population is either excitatory or inhibitory. The default pair-based
STDP window (amplitudes and time constants) depends only on that polarity
pair, so exactly four presets exist: E→E, E→I, I→E and I→I.

Each preset is a literal configuration; none is derived from another.

Usage:
    from synapto.learning.stdp_presets import resolve_preset, get_stdp_preset

    # Resolve by polarity pair
    w_plus, w_minus, tau_plus, tau_minus = resolve_preset(
        Polarity.EXCITATORY, Polarity.INHIBITORY
    )

    # Or by short code
    preset = get_stdp_preset("EI")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Tuple

from synapto.components.neurons.polarity import Polarity
from synapto.errors import InvalidParameterError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class STDPPreset:
    """Immutable STDP window preset for one polarity pair.

    Attributes:
        name: Human-readable name of the preset
        w_plus: Potentiation amplitude
        w_minus: Depression amplitude
        tau_plus: Potentiation time constant (ms)
        tau_minus: Depression time constant (ms)
        description: Biological context and use case
    """
    name: str
    w_plus: float
    w_minus: float
    tau_plus: float
    tau_minus: float
    description: str

    def as_tuple(self) -> Tuple[float, float, float, float]:
        """Return ``(w_plus, w_minus, tau_plus, tau_minus)``."""
        return (self.w_plus, self.w_minus, self.tau_plus, self.tau_minus)


# =============================================================================
# EXCITATORY SOURCE PRESETS
# =============================================================================

EE_PRESET = STDPPreset(
    name="Excitatory→Excitatory",
    w_plus=5.0,
    w_minus=1.0,
    tau_plus=25.0,
    tau_minus=100.0,
    description=(
        "Recurrent excitatory connections. "
        "Strong, narrow potentiation window paired with weak, broad depression. "
        "Causal pre→post pairings dominate."
    ),
)

EI_PRESET = STDPPreset(
    name="Excitatory→Inhibitory",
    w_plus=1.6,
    w_minus=1.0,
    tau_plus=25.0,
    tau_minus=100.0,
    description=(
        "Excitatory drive onto interneurons. "
        "Milder potentiation than E→E with the same broad depression. "
        "Recruits feedback inhibition for correlated input."
    ),
)

# =============================================================================
# INHIBITORY SOURCE PRESETS
# =============================================================================

IE_PRESET = STDPPreset(
    name="Inhibitory→Excitatory",
    w_plus=1.0,
    w_minus=1.2,
    tau_plus=20.0,
    tau_minus=20.0,
    description=(
        "Interneuron output onto excitatory cells. "
        "Symmetric time constants with slightly stronger depression. "
        "Balances excitation against inhibition."
    ),
)

II_PRESET = STDPPreset(
    name="Inhibitory→Inhibitory",
    w_plus=1.0,
    w_minus=1.0,
    tau_plus=20.0,
    tau_minus=20.0,
    description=(
        "Mutual inhibition between interneurons. "
        "Fully symmetric window."
    ),
)

# =============================================================================
# PRESET REGISTRY
# =============================================================================

STDP_PRESETS: Dict[Tuple[Polarity, Polarity], STDPPreset] = {
    (Polarity.EXCITATORY, Polarity.EXCITATORY): EE_PRESET,
    (Polarity.EXCITATORY, Polarity.INHIBITORY): EI_PRESET,
    (Polarity.INHIBITORY, Polarity.EXCITATORY): IE_PRESET,
    (Polarity.INHIBITORY, Polarity.INHIBITORY): II_PRESET,
}


def _preset_code(source: Polarity, target: Polarity) -> str:
    return source.short_code + target.short_code


def get_preset(source: Polarity, target: Polarity) -> STDPPreset:
    """Get the preset for a (source, target) polarity pair.

    Raises:
        InvalidParameterError: If either argument is not a Polarity
    """
    if not isinstance(source, Polarity):
        raise InvalidParameterError(f"source must be a Polarity, got {source!r}")
    if not isinstance(target, Polarity):
        raise InvalidParameterError(f"target must be a Polarity, got {target!r}")
    preset = STDP_PRESETS[(source, target)]
    logger.debug("Resolved STDP preset %s (%s)", _preset_code(source, target), preset.name)
    return preset


def resolve_preset(
    source: Polarity,
    target: Polarity,
) -> Tuple[float, float, float, float]:
    """Resolve default STDP window parameters for a polarity pair.

    Args:
        source: Polarity of the presynaptic population
        target: Polarity of the postsynaptic population

    Returns:
        ``(w_plus, w_minus, tau_plus, tau_minus)``

    Example:
        >>> resolve_preset(Polarity.EXCITATORY, Polarity.EXCITATORY)
        (5.0, 1.0, 25.0, 100.0)
    """
    return get_preset(source, target).as_tuple()


def get_stdp_preset(code: str) -> STDPPreset:
    """Get a preset by its short code ("EE", "EI", "IE" or "II").

    Raises:
        KeyError: If code is not recognized
    """
    by_code = {_preset_code(src, tar): preset for (src, tar), preset in STDP_PRESETS.items()}
    key = code.upper()
    if key not in by_code:
        available = ", ".join(by_code.keys())
        raise KeyError(
            f"Unknown STDP preset: {code}. "
            f"Available presets: {available}"
        )
    return by_code[key]


def list_presets() -> Dict[str, str]:
    """List all available STDP presets with descriptions.

    Returns:
        Dictionary mapping preset codes to descriptions
    """
    return {
        _preset_code(src, tar): preset.description
        for (src, tar), preset in STDP_PRESETS.items()
    }
