"""Interpolation of values observed over calendar time."""

from ._smoothed_curves import smoothed_curves
from ._time_series_interpolator import (
    TimeSeriesInterpolator,
    TimeSeriesPoint,
    time_series_interpolator,
    time_series_interpolator_unchecked,
)

__all__ = [
    "TimeSeriesInterpolator",
    "TimeSeriesPoint",
    "smoothed_curves",
    "time_series_interpolator",
    "time_series_interpolator_unchecked",
]
