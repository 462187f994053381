"""Utility functions for Synapto."""

from __future__ import annotations

from .core_utils import (
    apply_weight_delta,
    as_spike_time_tensor,
    clamp_weights,
    spike_time_difference,
)

__all__ = [
    "apply_weight_delta",
    "as_spike_time_tensor",
    "clamp_weights",
    "spike_time_difference",
]
