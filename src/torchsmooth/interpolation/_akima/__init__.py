"""Akima spline engine."""

from ._akima import AkimaSpline, akima
from ._akima_evaluate import akima_evaluate
from ._akima_fit import akima_fit

__all__ = [
    "AkimaSpline",
    "akima",
    "akima_evaluate",
    "akima_fit",
]
