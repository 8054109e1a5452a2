"""Testing utilities for torchsmooth."""

from . import strategies

__all__ = [
    "strategies",
]
