"""
Base Configuration Classes.

This module provides the base configuration class with the fields shared by
every component config (device and dtype) plus the dtype name lookup.

Author: Synapto Project
Date: October 2026
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import torch

from synapto.config.global_config import GlobalConfig
from synapto.errors import ConfigurationError

DTYPE_MAP: Dict[str, torch.dtype] = {
    "float16": torch.float16,
    "bfloat16": torch.bfloat16,
    "float32": torch.float32,
    "float64": torch.float64,
}
"""Floating dtypes accepted by configs, keyed by name."""


def resolve_dtype(name: str) -> torch.dtype:
    """Look up a floating torch dtype by name.

    Raises:
        ConfigurationError: If the name is not a known floating dtype
    """
    if name not in DTYPE_MAP:
        raise ConfigurationError(
            f"Unknown dtype '{name}'. "
            f"Choose from: {list(DTYPE_MAP.keys())}"
        )
    return DTYPE_MAP[name]


@dataclass
class BaseConfig:
    """Base configuration with common fields for all components.

    This provides standard fields that appear in almost every config:
    - device: Hardware device (cpu/cuda)
    - dtype: Tensor data type
    """

    device: str = GlobalConfig.DEFAULT_DEVICE
    """Device to run on: 'cpu', 'cuda', 'cuda:0', etc."""

    dtype: str = GlobalConfig.DEFAULT_DTYPE
    """Data type for tensors: 'float32', 'float64', 'float16', 'bfloat16'"""

    def get_torch_device(self) -> torch.device:
        """Get PyTorch device object."""
        return torch.device(self.device)

    def get_torch_dtype(self) -> torch.dtype:
        """Get PyTorch dtype object."""
        return resolve_dtype(self.dtype)
