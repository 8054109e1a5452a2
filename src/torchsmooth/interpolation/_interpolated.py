from ._interpolator import (
    InterpolationMethod,
    interpolator,
    interpolator_unchecked,
)
from ._samples import Samples
from ._validate_points import Points


def interpolated(
    points: Points,
    method: InterpolationMethod,
    count: int,
) -> Samples:
    """Smooth ``points`` into ``count`` evenly spaced samples.

    Raises the same errors as ``interpolator`` on invalid data.
    """
    return interpolator(points, method).generate_sequence(count)


def interpolated_unchecked(
    points: Points,
    method: InterpolationMethod,
    count: int,
) -> Samples:
    """Like ``interpolated``, but returns empty ``Samples`` on invalid data."""
    return interpolator_unchecked(points, method).generate_sequence(count)
