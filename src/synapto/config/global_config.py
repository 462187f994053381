"""Global configuration constants for Synapto."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GlobalConfig:
    """Global configuration constants for Synapto.

    This module centralizes constants that affect every plasticity rule,
    such as the floating-point type used for spike-time arithmetic and the
    global learning enable flag. These constants can be imported and used
    across all components to ensure consistency.
    """

    DEFAULT_DTYPE: str = "float32"
    """Floating dtype used when integer spike times are promoted for exp()."""

    DEFAULT_DEVICE: str = "cpu"
    """Device for tensors built from non-tensor inputs when no other tensor is given."""

    LEARNING_DISABLED: bool = False  # Set to True to freeze weights in apply_weight_delta()
    """Global learning/plasticity enable flag."""
