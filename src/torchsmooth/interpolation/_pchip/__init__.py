"""PCHIP (Piecewise Cubic Hermite Interpolating Polynomial) engine."""

from ._pchip import PCHIPSpline, pchip
from ._pchip_evaluate import pchip_evaluate
from ._pchip_fit import pchip_fit

__all__ = [
    "PCHIPSpline",
    "pchip",
    "pchip_evaluate",
    "pchip_fit",
]
