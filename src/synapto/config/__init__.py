"""
Synapto Configuration.

Package-wide constants and the base config class. Rule-level configuration
lives in its own module and is imported explicitly:

    from synapto.config import GlobalConfig, BaseConfig
    from synapto.config.stdp_config import STDPConfig

Author: Synapto Project
Date: October 2026
"""

from __future__ import annotations

from .global_config import GlobalConfig
from .base import DTYPE_MAP, BaseConfig, resolve_dtype

__all__ = [
    "GlobalConfig",
    "BaseConfig",
    "DTYPE_MAP",
    "resolve_dtype",
]
