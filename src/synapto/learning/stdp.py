"""
Spike-Timing-Dependent Plasticity (STDP) implementation.

STDP is a biologically-plausible learning rule where synaptic strength
changes based on the relative timing of pre- and post-synaptic spikes.

This module implements the event-driven pair rule used by the simulator:
instead of integrating traces every timestep, each synapse keeps the time
of its last presynaptic arrival (spike time plus transmission delay) and
each target neuron keeps the time of its last spike. When either side
fires, the rule turns the time difference into a weight change:

    On a postsynaptic spike (gated by the rule's regime):
        Hebbian:       Δw =  η * exp((t_arr - t_post) / τ+) * W+
        Anti-Hebbian:  Δw = -η * exp((t_arr - t_post) / τ-) * W-

    On a presynaptic spike (caller picks the trigger):
        Hebbian:       Δw = -η * exp((t_post - t_arr) / τ-) * W-
        Anti-Hebbian:  Δw =  η * exp((t_post - t_arr) / τ+) * W+

The regime flag only gates the postsynaptic trigger. Presynaptic triggers
are ungated; callers that want regime-sensitive presynaptic behaviour
choose between pre_trigger_hebb() and pre_trigger_anti_hebb() themselves.

Default window parameters come from the (source, target) polarity preset
table in synapto.learning.stdp_presets.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Tuple

import torch

from synapto.components.neurons.polarity import Polarity
from synapto.errors import (
    InvalidParameterError,
    validate_broadcast_into,
    validate_finite,
    validate_positive,
    validate_same_shape,
)
from synapto.learning.stdp_presets import resolve_preset
from synapto.typing import SpikeTimes, STDPWindow, WeightDelta
from synapto.utils.core_utils import as_spike_time_tensor, spike_time_difference

if TYPE_CHECKING:
    from synapto.config.stdp_config import STDPConfig

logger = logging.getLogger(__name__)


class PlasticityRegime(Enum):
    """Sign convention applied by the postsynaptic trigger."""

    HEBBIAN = "hebbian"  # Post spike after arrival → potentiation
    ANTI_HEBBIAN = "anti_hebbian"  # Post spike after arrival → depression


DEFAULT_REGIME = PlasticityRegime.HEBBIAN
"""Regime used by StandardSTDP.from_preset() when none is given."""


@dataclass(frozen=True)
class StandardSTDP:
    """Immutable pair-based STDP rule for one synaptic projection.

    Construct one rule per projection at network build time and share it
    read-only across every synapse batch of that projection. The rule holds
    no state between calls; spike history lives in the caller's arrays.

    The dataclass constructor is the explicit path: every field is stored
    verbatim. Use from_preset() to take the window from the polarity table.

    Args:
        source: Polarity of the presynaptic population
        target: Polarity of the postsynaptic population
        eta: Learning rate (> 0)
        regime: Sign convention for the postsynaptic trigger
        w_plus: Potentiation amplitude
        w_minus: Depression amplitude
        tau_plus: Potentiation time constant (> 0)
        tau_minus: Depression time constant (> 0)
        dtype: Optional float dtype for offsets of integer spike times
        device: Optional device for inputs given as NumPy arrays or lists

    Raises:
        InvalidParameterError: If eta, tau_plus or tau_minus is not a
            finite positive number, or an enum field has the wrong type

    Example:
        >>> rule = StandardSTDP.from_preset(
        ...     Polarity.EXCITATORY, Polarity.EXCITATORY, eta=0.01
        ... )
        >>> for t in range(n_steps):
        ...     # Your simulation loop
        ...     if post_fired:
        ...         dw = rule.post_trigger(last_post_spike, last_arrival)
        ...         weights += dw
    """

    source: Polarity
    target: Polarity
    eta: float
    regime: PlasticityRegime
    w_plus: float
    w_minus: float
    tau_plus: float
    tau_minus: float

    dtype: Optional[torch.dtype] = dataclasses.field(default=None, compare=False)
    """Float dtype for offsets of integer spike times (None = GlobalConfig.DEFAULT_DTYPE)."""

    device: Optional[torch.device] = dataclasses.field(default=None, compare=False)
    """Device for non-tensor inputs when neither argument is a tensor."""

    def __post_init__(self) -> None:
        if self.dtype is not None and not (
            isinstance(self.dtype, torch.dtype) and self.dtype.is_floating_point
        ):
            raise InvalidParameterError(f"dtype must be a floating torch.dtype, got {self.dtype!r}")
        if self.device is not None and not isinstance(self.device, torch.device):
            raise InvalidParameterError(f"device must be a torch.device, got {self.device!r}")

        if not isinstance(self.source, Polarity):
            raise InvalidParameterError(f"source must be a Polarity, got {self.source!r}")
        if not isinstance(self.target, Polarity):
            raise InvalidParameterError(f"target must be a Polarity, got {self.target!r}")
        if not isinstance(self.regime, PlasticityRegime):
            raise InvalidParameterError(
                f"regime must be a PlasticityRegime, got {self.regime!r}"
            )

        validate_positive(self.eta, "eta")
        validate_positive(self.tau_plus, "tau_plus")
        validate_positive(self.tau_minus, "tau_minus")
        validate_finite(self.w_plus, "w_plus")
        validate_finite(self.w_minus, "w_minus")

        if self.w_plus < 0 or self.w_minus < 0:
            logger.warning(
                "Negative STDP amplitude for %s→%s projection (w_plus=%s, w_minus=%s); "
                "trigger signs will be inverted",
                self.source.value, self.target.value, self.w_plus, self.w_minus,
            )

    # =========================================================================
    # Construction
    # =========================================================================

    @classmethod
    def from_preset(
        cls,
        source: Polarity,
        target: Polarity,
        eta: float,
        regime: PlasticityRegime = DEFAULT_REGIME,
    ) -> StandardSTDP:
        """Create a rule whose window comes from the polarity preset table.

        Args:
            source: Polarity of the presynaptic population
            target: Polarity of the postsynaptic population
            eta: Learning rate (> 0)
            regime: Sign convention for the postsynaptic trigger

        Returns:
            Validated rule
        """
        w_plus, w_minus, tau_plus, tau_minus = resolve_preset(source, target)
        return cls(
            source=source,
            target=target,
            eta=eta,
            regime=regime,
            w_plus=w_plus,
            w_minus=w_minus,
            tau_plus=tau_plus,
            tau_minus=tau_minus,
        )

    @classmethod
    def from_config(cls, config: STDPConfig) -> StandardSTDP:
        """Create a rule from a declarative STDPConfig.

        Preset values are used for any window parameter the config leaves
        as None.
        """
        w_plus, w_minus, tau_plus, tau_minus = config.resolve()
        rule = cls(
            source=config.source,
            target=config.target,
            eta=config.eta,
            regime=config.regime,
            w_plus=w_plus,
            w_minus=w_minus,
            tau_plus=tau_plus,
            tau_minus=tau_minus,
            dtype=config.get_torch_dtype(),
            device=config.get_torch_device(),
        )
        logger.debug("Built %r from config", rule)
        return rule

    def with_regime(self, regime: PlasticityRegime) -> StandardSTDP:
        """Return a new rule identical to this one except for the regime."""
        return dataclasses.replace(self, regime=regime)

    def with_eta(self, eta: float) -> StandardSTDP:
        """Return a new rule identical to this one except for the learning rate."""
        return dataclasses.replace(self, eta=eta)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def is_hebbian(self) -> bool:
        """True when the postsynaptic trigger potentiates."""
        return self.regime is PlasticityRegime.HEBBIAN

    @property
    def window(self) -> STDPWindow:
        """Resolved ``(w_plus, w_minus, tau_plus, tau_minus)``."""
        return (self.w_plus, self.w_minus, self.tau_plus, self.tau_minus)

    def get_diagnostics(self) -> Dict[str, Any]:
        """Get the resolved rule parameters as plain values."""
        return {
            "source": self.source.value,
            "target": self.target.value,
            "eta": self.eta,
            "regime": self.regime.value,
            "w_plus": self.w_plus,
            "w_minus": self.w_minus,
            "tau_plus": self.tau_plus,
            "tau_minus": self.tau_minus,
            "dtype": None if self.dtype is None else str(self.dtype),
            "device": None if self.device is None else str(self.device),
        }

    # =========================================================================
    # Triggers
    # =========================================================================

    def post_trigger(
        self,
        last_post_spike_time: SpikeTimes,
        last_arrival_time: SpikeTimes,
    ) -> WeightDelta:
        """Compute the weight change fired by a postsynaptic spike.

        Args:
            last_post_spike_time: Last postsynaptic spike time per synapse
            last_arrival_time: Last presynaptic arrival time per synapse,
                same shape as last_post_spike_time

        Returns:
            Weight delta with the shape of the inputs. Positive for a
            Hebbian rule, negative for an anti-Hebbian one (given positive
            amplitudes).

        Raises:
            ShapeMismatchError: If the input shapes differ
        """
        post, arrival = self._prepare(last_post_spike_time, last_arrival_time)
        validate_same_shape(post, arrival, names=("last_post_spike_time", "last_arrival_time"))

        dt = spike_time_difference(arrival, post, self.dtype)
        if self.regime is PlasticityRegime.HEBBIAN:
            return self.eta * torch.exp(dt / self.tau_plus) * self.w_plus
        return -self.eta * torch.exp(dt / self.tau_minus) * self.w_minus

    def pre_trigger_hebb(
        self,
        last_post_spike_time: SpikeTimes,
        last_arrival_time: SpikeTimes,
    ) -> WeightDelta:
        """Compute the Hebbian (depressing) weight change for a presynaptic spike.

        Does not consult the rule's regime.

        Args:
            last_post_spike_time: Last spike time of the target neuron(s);
                a scalar or any shape that broadcasts to last_arrival_time
            last_arrival_time: Last presynaptic arrival time per synapse

        Returns:
            Non-positive weight delta (given positive eta and w_minus) with
            the shape of last_arrival_time

        Raises:
            ShapeMismatchError: If last_post_spike_time does not broadcast
                to the shape of last_arrival_time
        """
        post, arrival = self._prepare_broadcast(last_post_spike_time, last_arrival_time)
        dt = spike_time_difference(post, arrival, self.dtype)
        return -self.eta * torch.exp(dt / self.tau_minus) * self.w_minus

    def pre_trigger_anti_hebb(
        self,
        last_post_spike_time: SpikeTimes,
        last_arrival_time: SpikeTimes,
    ) -> WeightDelta:
        """Compute the anti-Hebbian (potentiating) weight change for a presynaptic spike.

        Same inputs and shape rules as pre_trigger_hebb(). Does not consult
        the rule's regime.

        Returns:
            Non-negative weight delta (given positive eta and w_plus)
        """
        post, arrival = self._prepare_broadcast(last_post_spike_time, last_arrival_time)
        dt = spike_time_difference(post, arrival, self.dtype)
        return self.eta * torch.exp(dt / self.tau_plus) * self.w_plus

    # =========================================================================
    # Internals
    # =========================================================================

    def _prepare(
        self,
        last_post_spike_time: SpikeTimes,
        last_arrival_time: SpikeTimes,
    ) -> Tuple[torch.Tensor, torch.Tensor]:
        reference = None
        if isinstance(last_arrival_time, torch.Tensor):
            reference = last_arrival_time
        elif isinstance(last_post_spike_time, torch.Tensor):
            reference = last_post_spike_time
        return (
            as_spike_time_tensor(last_post_spike_time, like=reference, device=self.device),
            as_spike_time_tensor(last_arrival_time, like=reference, device=self.device),
        )

    def _prepare_broadcast(
        self,
        last_post_spike_time: SpikeTimes,
        last_arrival_time: SpikeTimes,
    ) -> Tuple[torch.Tensor, torch.Tensor]:
        post, arrival = self._prepare(last_post_spike_time, last_arrival_time)
        validate_broadcast_into(post, arrival, names=("last_post_spike_time", "last_arrival_time"))
        return post, arrival

    def __repr__(self) -> str:
        return (
            f"StandardSTDP({self.source.short_code}->{self.target.short_code}, "
            f"η={self.eta}, {self.regime.value}, "
            f"W+={self.w_plus}, W-={self.w_minus}, "
            f"τ+={self.tau_plus}, τ-={self.tau_minus})"
        )
