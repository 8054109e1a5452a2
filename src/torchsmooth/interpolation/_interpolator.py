"""Method selection and the point-query interface over fitted splines."""

import math
import warnings
from dataclasses import dataclass
from typing import Callable, Literal, Optional, Tuple, Union, overload

import torch
from torch import Tensor

from ._akima import AkimaSpline, akima_evaluate, akima_fit
from ._cubic_spline import CubicSpline, cubic_spline_evaluate, cubic_spline_fit
from ._interpolation_error import InterpolationError
from ._interpolation_warning import InterpolationWarning
from ._pchip import PCHIPSpline, pchip_evaluate, pchip_fit
from ._samples import Samples, empty_samples
from ._validate_points import Points, as_tensors

InterpolationMethod = Literal["cubic_spline", "pchip", "akima"]

Spline = Union[CubicSpline, PCHIPSpline, AkimaSpline]

_ENGINES = {
    "cubic_spline": (cubic_spline_fit, cubic_spline_evaluate),
    "pchip": (pchip_fit, pchip_evaluate),
    "akima": (akima_fit, akima_evaluate),
}

INTERPOLATION_METHODS: Tuple[str, ...] = tuple(_ENGINES)


def _engine(method: str) -> Tuple[Callable, Callable]:
    try:
        return _ENGINES[method]
    except KeyError:
        raise ValueError(
            f"Unknown interpolation method: {method!r}. "
            f"Expected one of {INTERPOLATION_METHODS}"
        ) from None


@dataclass(frozen=True, eq=False)
class Interpolator:
    """Fitted curve behind a uniform query interface.

    An interpolator is either valid, holding the fitted ``spline``, or
    invalid, holding the ``error`` that stopped construction. Invalid
    interpolators answer every query with a "no data" value instead of
    raising: NaN from ``evaluate``, empty ``Samples`` from
    ``generate_sequence`` and ``None`` from ``domain``.

    Attributes
    ----------
    method : str
        One of ``"cubic_spline"``, ``"pchip"``, ``"akima"``.
    spline : CubicSpline, PCHIPSpline or AkimaSpline, optional
        Fitted engine state. ``None`` when invalid.
    error : InterpolationError, optional
        Construction failure. ``None`` when valid.
    """

    method: str
    spline: Optional[Spline] = None
    error: Optional[InterpolationError] = None

    def is_valid(self) -> bool:
        """Whether the interpolator holds a fitted curve."""
        return self.spline is not None

    def domain(self) -> Optional[Tuple[float, float]]:
        """Closed x-range ``(x_min, x_max)`` of the samples, or ``None``."""
        if self.spline is None:
            return None
        knots = self.spline.knots
        return knots[0].item(), knots[-1].item()

    @overload
    def evaluate(self, x: float) -> float: ...

    @overload
    def evaluate(self, x: Tensor) -> Tensor: ...

    def evaluate(self, x):
        """
        Evaluate the curve.

        Parameters
        ----------
        x : float or Tensor
            Query point(s). Values outside the domain are clamped to it.

        Returns
        -------
        float or Tensor
            A float for a scalar query, otherwise a float64 tensor shaped
            like ``x``. NaN when the interpolator is invalid.
        """
        if isinstance(x, Tensor):
            if self.spline is None:
                return torch.full(x.shape, math.nan, dtype=torch.float64)
            _, evaluate = _engine(self.method)
            return evaluate(self.spline, x)

        if self.spline is None:
            return math.nan
        _, evaluate = _engine(self.method)
        return evaluate(self.spline, float(x)).item()

    def __call__(self, x):
        return self.evaluate(x)

    def generate_sequence(self, count: int) -> Samples:
        """
        Evaluate the curve at ``count`` evenly spaced points.

        Parameters
        ----------
        count : int
            Number of points. The first and last land exactly on the
            domain endpoints.

        Returns
        -------
        Samples
            ``count`` samples, or none when ``count < 2`` or the
            interpolator is invalid.
        """
        if self.spline is None or count < 2:
            return empty_samples()

        x_min, x_max = self.domain()
        x = torch.linspace(x_min, x_max, count, dtype=torch.float64)
        x[0] = x_min
        x[-1] = x_max

        return Samples(x=x, y=self.evaluate(x), batch_size=[count])


def interpolator(
    points: Points,
    method: InterpolationMethod = "cubic_spline",
) -> Interpolator:
    """
    Build an interpolator, raising on invalid data.

    Parameters
    ----------
    points : Tensor or iterable
        Samples in any order; see ``as_tensors`` for accepted forms.
    method : {"cubic_spline", "pchip", "akima"}
        Interpolation engine.

    Returns
    -------
    Interpolator
        A valid interpolator.

    Raises
    ------
    InterpolationError
        ``InsufficientPointsError``, ``DuplicateXValuesError`` or
        ``InvalidValueError`` describing the first problem found.
    ValueError
        If ``method`` is not a known method.

    Examples
    --------
    >>> f = interpolator([(0.0, 1.0), (1.0, 2.0), (2.0, 1.5)], method="pchip")
    >>> f.evaluate(0.5)
    1.71875
    """
    fit, _ = _engine(method)
    x, y = as_tensors(points)
    return Interpolator(method=method, spline=fit(x, y))


def interpolator_unchecked(
    points: Points,
    method: InterpolationMethod = "cubic_spline",
) -> Interpolator:
    """
    Build an interpolator, degrading to an invalid one on bad data.

    Takes the same arguments as ``interpolator``. Data problems never
    raise; instead an ``InterpolationWarning`` is emitted and the returned
    interpolator has ``is_valid() == False`` with the failure in
    ``error``. An unknown ``method`` still raises ``ValueError``.
    """
    fit, _ = _engine(method)
    try:
        x, y = as_tensors(points)
        spline = fit(x, y)
    except InterpolationError as error:
        warnings.warn(
            f"Cannot build {method} interpolator: {error}. "
            f"Queries will return no data.",
            InterpolationWarning,
            stacklevel=2,
        )
        return Interpolator(method=method, error=error)

    return Interpolator(method=method, spline=spline)
