"""torchsmooth: smooth curves through 2-D samples with PyTorch."""

from . import (
    interpolation,
    time_series,
)

__all__ = [
    "interpolation",
    "time_series",
]

__version__ = "0.1.0"
