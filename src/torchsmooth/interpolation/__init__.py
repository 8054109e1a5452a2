"""Smooth interpolation of 2-D samples with PyTorch tensors.

Three engines fit a curve through samples with strictly increasing x
(input may arrive unsorted) and evaluate it with clamping at the domain
boundaries.

Interpolators
-------------
interpolator
    Build an interpolator for a method, raising on invalid data.
interpolator_unchecked
    Build an interpolator for a method, degrading to an invalid one.
interpolated
    Fit and sample a curve in one call.
interpolated_unchecked
    Fit and sample a curve in one call, empty on invalid data.

Cubic Splines
-------------
cubic_spline_fit
    Fit a natural cubic spline (C2, zero end curvature).
cubic_spline_evaluate
    Evaluate a cubic spline at query points.

PCHIP
-----
pchip_fit
    Fit a monotonicity-preserving cubic Hermite interpolant.
pchip_evaluate
    Evaluate a PCHIP spline at query points.

Akima
-----
akima_fit
    Fit an outlier-robust cubic Hermite interpolant.
akima_evaluate
    Evaluate an Akima spline at query points.

Data Types
----------
Interpolator
    Query interface over a fitted spline.
CubicSpline, PCHIPSpline, AkimaSpline
    Fitted engine state.
Sample
    One (x, y) observation.
Samples
    Generated (x, y) sequence.

Exceptions
----------
InterpolationError
    Base exception for construction errors.
InsufficientPointsError
    Fewer than two samples.
DuplicateXValuesError
    Two samples share an x-coordinate.
InvalidValueError
    NaN, infinite or malformed sample values.
InterpolationWarning
    A best-effort construction produced an invalid interpolator.
"""

from ._akima import (
    AkimaSpline,
    akima,
    akima_evaluate,
    akima_fit,
)
from ._cubic_spline import (
    CubicSpline,
    cubic_spline,
    cubic_spline_evaluate,
    cubic_spline_fit,
)
from ._duplicate_x_values_error import DuplicateXValuesError
from ._hermite_evaluate import hermite_evaluate
from ._insufficient_points_error import InsufficientPointsError
from ._interpolated import interpolated, interpolated_unchecked
from ._interpolation_error import InterpolationError
from ._interpolation_warning import InterpolationWarning
from ._interpolator import (
    INTERPOLATION_METHODS,
    InterpolationMethod,
    Interpolator,
    interpolator,
    interpolator_unchecked,
)
from ._invalid_value_error import InvalidValueError
from ._pchip import (
    PCHIPSpline,
    pchip,
    pchip_evaluate,
    pchip_fit,
)
from ._samples import Samples
from ._validate_points import Sample, as_tensors, validate_points

__all__ = [
    "AkimaSpline",
    "CubicSpline",
    "DuplicateXValuesError",
    "INTERPOLATION_METHODS",
    "InsufficientPointsError",
    "InterpolationError",
    "InterpolationMethod",
    "InterpolationWarning",
    "Interpolator",
    "InvalidValueError",
    "PCHIPSpline",
    "Sample",
    "Samples",
    "akima",
    "akima_evaluate",
    "akima_fit",
    "as_tensors",
    "cubic_spline",
    "cubic_spline_evaluate",
    "cubic_spline_fit",
    "hermite_evaluate",
    "interpolated",
    "interpolated_unchecked",
    "interpolator",
    "interpolator_unchecked",
    "pchip",
    "pchip_evaluate",
    "pchip_fit",
    "validate_points",
]
