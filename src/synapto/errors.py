"""
Custom exception classes and validation utilities for Synapto.

This module provides:
1. Hierarchical exception classes for different error categories
2. Validation utilities that enforce parameter constraints at construction
3. Consistent error message formatting

Exception Hierarchy:
====================
SynaptoError (base) - Base exception for all Synapto-specific errors
├── ConfigurationError - Invalid configuration parameters
│   └── InvalidParameterError - Learning rate / time constant out of range
└── ShapeMismatchError - Trigger inputs that are not element-aligned

Both leaf errors also derive from ValueError so callers that only know
about the builtin hierarchy still catch them.

Author: Synapto Project
Date: October 2026
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Sequence, Tuple

import torch

# =============================================================================
# Exception Hierarchy
# =============================================================================


class SynaptoError(Exception):
    """Base exception for all Synapto-specific errors.

    All custom exceptions in Synapto inherit from this class, enabling
    code to catch Synapto errors specifically.
    """


class ConfigurationError(SynaptoError):
    """Invalid configuration parameters.

    Raised when configuration values are out of valid range or incompatible
    with each other.
    """


class InvalidParameterError(ConfigurationError, ValueError):
    """A plasticity parameter is outside its valid domain.

    Raised at rule construction when the learning rate or one of the time
    constants is not a finite, strictly positive number.
    """


class ShapeMismatchError(SynaptoError, ValueError):
    """Spike-time arrays passed to a trigger are not element-aligned."""


# =============================================================================
# Validation Utilities
# =============================================================================


def validate_finite(value: Any, name: str) -> None:
    """Validate that a scalar parameter is a finite real number.

    Args:
        value: Value to validate
        name: Parameter name for error message

    Raises:
        InvalidParameterError: If value is not numeric, NaN or Inf
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameterError(
            f"{name} must be a real number, got {type(value).__name__}"
        )
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name}={value} must be finite (not inf/nan)")


def validate_positive(value: Any, name: str) -> None:
    """Validate that a scalar parameter is finite and strictly positive.

    Args:
        value: Value to validate
        name: Parameter name for error message

    Raises:
        InvalidParameterError: If value is non-finite or <= 0

    Example:
        >>> validate_positive(20.0, "tau_plus")  # Passes
        >>> validate_positive(0.0, "tau_plus")   # Raises InvalidParameterError
    """
    validate_finite(value, name)
    if value <= 0:
        raise InvalidParameterError(f"{name}={value} must be positive")


def validate_same_shape(
    a: torch.Tensor,
    b: torch.Tensor,
    names: Sequence[str] = ("a", "b"),
) -> None:
    """Validate that two tensors have identical shapes.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if a.shape != b.shape:
        raise ShapeMismatchError(
            f"{names[0]} has shape {tuple(a.shape)} but {names[1]} has shape "
            f"{tuple(b.shape)}; inputs must be element-aligned"
        )


def validate_broadcast_into(
    small: torch.Tensor,
    target: torch.Tensor,
    names: Sequence[str] = ("a", "b"),
) -> Tuple[int, ...]:
    """Validate that ``small`` broadcasts against ``target`` without enlarging it.

    Returns:
        The shape of ``target``

    Raises:
        ShapeMismatchError: If broadcasting fails or would change target's shape
    """
    try:
        shape = torch.broadcast_shapes(small.shape, target.shape)
    except RuntimeError as exc:
        raise ShapeMismatchError(
            f"{names[0]} with shape {tuple(small.shape)} cannot be broadcast "
            f"against {names[1]} with shape {tuple(target.shape)}"
        ) from exc
    if shape != target.shape:
        raise ShapeMismatchError(
            f"{names[0]} with shape {tuple(small.shape)} would enlarge "
            f"{names[1]} with shape {tuple(target.shape)} to {tuple(shape)}"
        )
    return tuple(shape)
