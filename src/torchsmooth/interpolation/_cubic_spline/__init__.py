from ._cubic_spline import (
    CubicSpline,
    cubic_spline,
)
from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_fit import cubic_spline_fit

__all__ = [
    "CubicSpline",
    "cubic_spline",
    "cubic_spline_evaluate",
    "cubic_spline_fit",
]
