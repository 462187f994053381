"""
Type Aliases for Synapto

This module defines type aliases used throughout the Synapto codebase for
clearer type hints and better IDE support.

Example:
    from synapto.typing import SpikeTimes, WeightDelta

Author: Synapto Project
Date: October 2026
"""

from typing import Sequence, Tuple, Union

import numpy as np
import torch

# ============================================================================
# Spike-Time Inputs
# ============================================================================

SpikeTimes = Union[torch.Tensor, np.ndarray, Sequence[float], float, int]
"""Spike timestamps accepted by trigger functions.

Tensors are used as-is; NumPy arrays, sequences and scalars are converted
to tensors on the device of the other trigger argument.

Example:
    last_arrival: SpikeTimes = torch.tensor([10.0, 12.0, 15.0])
    last_post: SpikeTimes = 14  # scalar broadcast across synapses
"""

# ============================================================================
# Plasticity Outputs
# ============================================================================

WeightDelta = torch.Tensor
"""Elementwise weight change, same shape as the arrival-time input."""

STDPWindow = Tuple[float, float, float, float]
"""Resolved ``(w_plus, w_minus, tau_plus, tau_minus)`` parameters."""
