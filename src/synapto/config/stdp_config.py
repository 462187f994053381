"""
STDP Projection Configuration.

Declarative description of the plasticity rule attached to one synaptic
projection. Window parameters left as None are taken from the polarity
preset table when the config is resolved.

Usage:
    from synapto.config.stdp_config import STDPConfig
    from synapto.learning.stdp import StandardSTDP

    config = STDPConfig(source="excitatory", target="inhibitory", eta=0.005)
    rule = StandardSTDP.from_config(config)

Author: Synapto Project
Date: October 2026
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from synapto.components.neurons.polarity import Polarity
from synapto.config.base import BaseConfig
from synapto.errors import ConfigurationError, validate_finite, validate_positive
from synapto.learning.stdp import DEFAULT_REGIME, PlasticityRegime
from synapto.learning.stdp_presets import resolve_preset
from synapto.typing import STDPWindow

logger = logging.getLogger(__name__)


@dataclass
class STDPConfig(BaseConfig):
    """Configuration for a projection's STDP rule.

    Attributes:
        source: Presynaptic population polarity (enum or its string value)
        target: Postsynaptic population polarity (enum or its string value)
        eta: Learning rate
        regime: Postsynaptic sign convention (enum or its string value)
        w_plus: Potentiation amplitude override (None = preset)
        w_minus: Depression amplitude override (None = preset)
        tau_plus: Potentiation time constant override in ms (None = preset)
        tau_minus: Depression time constant override in ms (None = preset)
    """

    source: Union[Polarity, str] = Polarity.EXCITATORY
    target: Union[Polarity, str] = Polarity.EXCITATORY
    eta: float = 0.01
    regime: Union[PlasticityRegime, str] = DEFAULT_REGIME

    w_plus: Optional[float] = None
    w_minus: Optional[float] = None
    tau_plus: Optional[float] = None
    tau_minus: Optional[float] = None

    def __post_init__(self) -> None:
        try:
            self.source = Polarity(self.source)
            self.target = Polarity(self.target)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown polarity: {exc}. "
                f"Choose from: {[p.value for p in Polarity]}"
            ) from exc
        try:
            self.regime = PlasticityRegime(self.regime)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown regime: {exc}. "
                f"Choose from: {[r.value for r in PlasticityRegime]}"
            ) from exc

    def validate(self) -> None:
        """Check the learning rate and any explicit window overrides.

        Raises:
            InvalidParameterError: If eta or a time constant is not a finite
                positive number, or an amplitude is not finite
        """
        validate_positive(self.eta, "eta")
        if self.tau_plus is not None:
            validate_positive(self.tau_plus, "tau_plus")
        if self.tau_minus is not None:
            validate_positive(self.tau_minus, "tau_minus")
        if self.w_plus is not None:
            validate_finite(self.w_plus, "w_plus")
        if self.w_minus is not None:
            validate_finite(self.w_minus, "w_minus")

    def resolve(self) -> STDPWindow:
        """Resolve the window, filling unset parameters from the preset table.

        Returns:
            ``(w_plus, w_minus, tau_plus, tau_minus)``
        """
        self.validate()
        w_plus, w_minus, tau_plus, tau_minus = resolve_preset(self.source, self.target)
        window = (
            w_plus if self.w_plus is None else self.w_plus,
            w_minus if self.w_minus is None else self.w_minus,
            tau_plus if self.tau_plus is None else self.tau_plus,
            tau_minus if self.tau_minus is None else self.tau_minus,
        )
        logger.debug(
            "Resolved STDP window for %s→%s: W+=%s W-=%s τ+=%s τ-=%s",
            self.source.value, self.target.value, *window,
        )
        return window

    @property
    def uses_preset(self) -> bool:
        """True when no window parameter is overridden."""
        return all(
            value is None
            for value in (self.w_plus, self.w_minus, self.tau_plus, self.tau_minus)
        )
