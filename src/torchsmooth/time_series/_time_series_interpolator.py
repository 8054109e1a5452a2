"""Calendar-time adapter over the numeric interpolators."""

import warnings
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, NamedTuple, Tuple

from ..interpolation import (
    InterpolationMethod,
    InterpolationWarning,
    Interpolator,
    InvalidValueError,
    Sample,
    interpolator,
    interpolator_unchecked,
)


class TimeSeriesPoint(NamedTuple):
    """A value observed (or interpolated) at a point in time."""

    date: datetime
    value: float


def _to_samples(
    points: Iterable[TimeSeriesPoint],
) -> Tuple[Tuple[TimeSeriesPoint, ...], List[Sample]]:
    try:
        keyed = [(point.date.timestamp(), point) for point in points]
    except (AttributeError, TypeError) as error:
        raise InvalidValueError("time series points need a date") from error

    keyed.sort(key=lambda item: item[0])

    ordered = tuple(point for _, point in keyed)
    samples = [Sample(timestamp, point.value) for timestamp, point in keyed]
    return ordered, samples


@dataclass(frozen=True, eq=False)
class TimeSeriesInterpolator:
    """Interpolator whose x-axis is time.

    Dates map to POSIX seconds (``datetime.timestamp``); naive datetimes
    are read as local time, as ``datetime`` itself does.

    Attributes
    ----------
    points : tuple of TimeSeriesPoint
        The input points, sorted by date.
    interpolator : Interpolator
        Numeric interpolator over the timestamps.
    """

    points: Tuple[TimeSeriesPoint, ...]
    interpolator: Interpolator

    def is_valid(self) -> bool:
        return self.interpolator.is_valid()

    def value_at(self, date: datetime) -> float:
        """Interpolated value at ``date``, clamped to the sampled span."""
        return self.interpolator.evaluate(date.timestamp())

    def smoothed_points(self, count: int) -> List[TimeSeriesPoint]:
        """
        Sample the curve at ``count`` evenly spaced dates.

        The first and last dates are those of the earliest and latest
        input points. Returned dates carry the earliest point's tzinfo.
        Returns an empty list when the interpolator is invalid, when
        ``count < 2`` or when all points share one date.
        """
        if not self.is_valid() or count < 2:
            return []

        start = self.points[0].date
        if self.points[-1].date.timestamp() <= start.timestamp():
            return []

        samples = self.interpolator.generate_sequence(count)
        return [
            TimeSeriesPoint(datetime.fromtimestamp(x, tz=start.tzinfo), y)
            for x, y in zip(samples.x.tolist(), samples.y.tolist())
        ]


def time_series_interpolator(
    points: Iterable[TimeSeriesPoint],
    method: InterpolationMethod = "cubic_spline",
) -> TimeSeriesInterpolator:
    """Build a time-series interpolator, raising on invalid data.

    Raises
    ------
    InterpolationError
        If the points cannot be interpolated; see ``interpolator``.
    """
    ordered, samples = _to_samples(points)
    return TimeSeriesInterpolator(ordered, interpolator(samples, method))


def time_series_interpolator_unchecked(
    points: Iterable[TimeSeriesPoint],
    method: InterpolationMethod = "cubic_spline",
) -> TimeSeriesInterpolator:
    """Build a time-series interpolator, degrading to an invalid one.

    Invalid data emits an ``InterpolationWarning``; see
    ``interpolator_unchecked``.
    """
    try:
        ordered, samples = _to_samples(points)
    except InvalidValueError as error:
        warnings.warn(
            f"Cannot build {method} interpolator: {error}. "
            f"Queries will return no data.",
            InterpolationWarning,
            stacklevel=2,
        )
        return TimeSeriesInterpolator((), Interpolator(method, error=error))

    return TimeSeriesInterpolator(
        ordered, interpolator_unchecked(samples, method)
    )
