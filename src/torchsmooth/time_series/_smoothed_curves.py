from typing import Dict, Iterable, List

from ..interpolation import INTERPOLATION_METHODS
from ._time_series_interpolator import (
    TimeSeriesPoint,
    time_series_interpolator_unchecked,
)


def smoothed_curves(
    points: Iterable[TimeSeriesPoint],
    count: int = 100,
) -> Dict[str, List[TimeSeriesPoint]]:
    """
    Smooth one time series with every interpolation method.

    Parameters
    ----------
    points : iterable of TimeSeriesPoint
        Observations in any order.
    count : int
        Points per curve.

    Returns
    -------
    dict
        Maps ``"cubic_spline"``, ``"pchip"`` and ``"akima"`` to their
        smoothed curves. Every curve is empty when the data is invalid.
    """
    points = list(points)
    return {
        method: time_series_interpolator_unchecked(
            points, method
        ).smoothed_points(count)
        for method in INTERPOLATION_METHODS
    }
