"""
Neural components shared across learning rules.
"""

from __future__ import annotations

from .neurons import Polarity

__all__ = [
    "Polarity",
]
