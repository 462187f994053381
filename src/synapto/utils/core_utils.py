"""
Core Utilities for Synapto.

This module provides tensor helpers shared by plasticity rules and by the
code that applies their weight deltas.

Author: Synapto Project
Date: October 2026
"""

from __future__ import annotations

from typing import Optional

import torch

from synapto.config.base import resolve_dtype
from synapto.config.global_config import GlobalConfig
from synapto.errors import validate_same_shape
from synapto.typing import SpikeTimes


def as_spike_time_tensor(
    value: SpikeTimes,
    like: Optional[torch.Tensor] = None,
    device: Optional[torch.device] = None,
) -> torch.Tensor:
    """Convert spike timestamps to a tensor without copying tensors.

    Tensors are returned as-is. Other inputs are placed on ``like``'s device,
    then ``device``, then GlobalConfig.DEFAULT_DEVICE. The dtype is left
    alone: integer timestamps stay integers until spike_time_difference()
    has taken the exact offset.

    Args:
        value: Tensor, NumPy array, sequence or scalar of spike times
        like: Optional reference tensor supplying the device
        device: Fallback device when no reference tensor is given

    Returns:
        Tensor (the input itself when it already is one)

    Example:
        >>> as_spike_time_tensor([1, 2, 3]).dtype
        torch.int64
    """
    if isinstance(value, torch.Tensor):
        return value
    if like is not None:
        device = like.device
    elif device is None:
        device = torch.device(GlobalConfig.DEFAULT_DEVICE)
    return torch.as_tensor(value, device=device)


def spike_time_difference(
    minuend: torch.Tensor,
    subtrahend: torch.Tensor,
    dtype: Optional[torch.dtype] = None,
) -> torch.Tensor:
    """Compute ``minuend - subtrahend`` as a floating tensor ready for exp().

    Integer timestamps are subtracted exactly in int64 before conversion, so
    large simulation times (beyond float32's 2**24 integer range) keep their
    offsets. The integer result is converted to ``dtype``, or
    GlobalConfig.DEFAULT_DTYPE when none is given. Two floating inputs keep
    torch's usual type promotion; a mixed pair is subtracted in float64 and
    returned in the floating input's dtype.

    Args:
        minuend: Later spike times
        subtrahend: Earlier spike times (broadcastable against minuend)
        dtype: Floating dtype for differences of integer timestamps

    Returns:
        Floating-point tensor of time offsets

    Example:
        >>> spike_time_difference(torch.tensor([16777217]), torch.tensor([16777216]))
        tensor([1.])
    """
    minuend_float = minuend.is_floating_point()
    subtrahend_float = subtrahend.is_floating_point()

    if minuend_float and subtrahend_float:
        return minuend - subtrahend

    if not minuend_float and not subtrahend_float:
        diff = minuend.to(torch.int64) - subtrahend.to(torch.int64)
        return diff.to(dtype if dtype is not None else resolve_dtype(GlobalConfig.DEFAULT_DTYPE))

    result_dtype = minuend.dtype if minuend_float else subtrahend.dtype
    diff = minuend.to(torch.float64) - subtrahend.to(torch.float64)
    return diff.to(result_dtype)


def clamp_weights(
    weights: torch.Tensor,
    w_min: Optional[float] = None,
    w_max: Optional[float] = None,
    inplace: bool = True,
) -> torch.Tensor:
    """Clamp weight tensor to valid range.

    Standard pattern for enforcing weight bounds after learning updates.
    Operates in-place by default for efficiency. A bound of None leaves
    that side unbounded.

    Args:
        weights: Weight tensor to clamp
        w_min: Minimum weight value (default: None)
        w_max: Maximum weight value (default: None)
        inplace: If True, modify weights in place (default: True)

    Returns:
        Clamped weight tensor

    Example:
        >>> clamp_weights(weights, 0.0, 1.0)
    """
    if w_min is None and w_max is None:
        return weights if inplace else weights.clone()
    if inplace:
        return weights.clamp_(w_min, w_max)
    return weights.clamp(w_min, w_max)


def apply_weight_delta(
    weights: torch.Tensor,
    delta: torch.Tensor,
    w_min: Optional[float] = None,
    w_max: Optional[float] = None,
    inplace: bool = True,
) -> torch.Tensor:
    """Add a plasticity delta into a weight tensor and enforce bounds.

    This is the driver-side step that consumes the result of a trigger call.
    When GlobalConfig.LEARNING_DISABLED is set the weights are returned
    unchanged.

    Args:
        weights: Weight tensor, element-aligned with ``delta``
        delta: Weight change returned by a trigger
        w_min: Optional lower bound applied after the update
        w_max: Optional upper bound applied after the update
        inplace: If True, modify weights in place (default: True)

    Returns:
        Updated weight tensor

    Raises:
        ShapeMismatchError: If weights and delta shapes differ

    Example:
        >>> dw = rule.post_trigger(last_post, last_arrival)
        >>> apply_weight_delta(weights, dw, w_min=0.0)
    """
    validate_same_shape(weights, delta, names=("weights", "delta"))

    if GlobalConfig.LEARNING_DISABLED:
        return weights if inplace else weights.clone()

    with torch.no_grad():
        if inplace:
            weights.add_(delta)
        else:
            weights = weights + delta
        return clamp_weights(weights, w_min, w_max, inplace=True)
