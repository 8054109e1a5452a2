from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._validate_points import validate_points

if TYPE_CHECKING:
    from ._pchip import PCHIPSpline

# Secants smaller than this in magnitude mark a flat segment.
FLAT_SECANT_TOLERANCE = 1e-30


def pchip_fit(
    x: Tensor,
    y: Tensor,
) -> PCHIPSpline:
    """
    Fit a monotonicity-preserving cubic Hermite curve.

    Parameters
    ----------
    x : Tensor
        Sample x-values, shape (n,), any order.
    y : Tensor
        Sample values, shape (n,).

    Returns
    -------
    PCHIPSpline
        Knots, values and slopes of the curve, sorted by x.

    Raises
    ------
    InsufficientPointsError
        Fewer than 2 samples.
    DuplicateXValuesError
        Two samples closer than 1e-15 in x.
    InvalidValueError
        A NaN or infinite coordinate.

    Notes
    -----
    With segment widths ``h`` and secants ``delta``:

    - an interior knot whose neighbouring secants share a strict sign gets
      the weighted harmonic mean ``(w1 + w2) / (w1/delta[i-1] + w2/delta[i])``
      with ``w1 = 2*h[i] + h[i-1]`` and ``w2 = h[i] + 2*h[i-1]``; any other
      interior knot is a local extremum and gets slope 0;
    - each end knot gets the one-sided three-point estimate, zeroed when it
      points against the end secant and capped at three times that secant
      when the first two secants change sign;
    - a final left-to-right pass rescales any segment whose
      ``alpha = d[i]/delta[i]``, ``beta = d[i+1]/delta[i]`` leave the circle
      ``alpha**2 + beta**2 <= 9``, and zeroes both slopes of flat segments.

    Two samples give the straight line between them.

    References
    ----------
    Fritsch, F. N. and Carlson, R. E. (1980). "Monotone Piecewise Cubic
    Interpolation". SIAM Journal on Numerical Analysis. 17 (2): 238-246.
    """
    x, y = validate_points(x, y)

    h = x[1:] - x[:-1]
    delta = (y[1:] - y[:-1]) / h

    if x.shape[0] == 2:
        dydx = delta.repeat(2)
    else:
        dydx = torch.empty_like(y)
        dydx[1:-1] = _interior_slopes(h, delta)
        dydx[0] = _end_slope(h[0], h[1], delta[0], delta[1])
        dydx[-1] = _end_slope(h[-1], h[-2], delta[-1], delta[-2])
        dydx = _limit_slopes(dydx, delta)

    from ._pchip import PCHIPSpline

    return PCHIPSpline(knots=x, y=y, dydx=dydx, batch_size=[])


def _interior_slopes(h: Tensor, delta: Tensor) -> Tensor:
    left = delta[:-1]
    right = delta[1:]
    w1 = 2 * h[1:] + h[:-1]
    w2 = h[1:] + 2 * h[:-1]

    same_sign = left * right > 0

    # Placeholders keep the division finite where the mean is discarded
    one = torch.ones_like(left)
    mean = (w1 + w2) / (
        w1 / torch.where(same_sign, left, one)
        + w2 / torch.where(same_sign, right, one)
    )

    return torch.where(same_sign, mean, torch.zeros_like(mean))


def _end_slope(
    h_end: Tensor, h_next: Tensor, delta_end: Tensor, delta_next: Tensor
) -> Tensor:
    """Three-point slope at an end knot, kept from overshooting."""
    slope = ((2 * h_end + h_next) * delta_end - h_end * delta_next) / (
        h_end + h_next
    )

    if slope * delta_end < 0:
        return torch.zeros_like(slope)
    if delta_end * delta_next < 0 and slope.abs() > (3 * delta_end).abs():
        return 3 * delta_end
    return slope


def _limit_slopes(dydx: Tensor, delta: Tensor) -> Tensor:
    # Sequential: a rescaled right slope is the next segment's left slope.
    dydx = dydx.clone()

    for i, secant in enumerate(delta):
        if secant.abs() < FLAT_SECANT_TOLERANCE:
            dydx[i] = 0
            dydx[i + 1] = 0
            continue

        alpha = dydx[i] / secant
        beta = dydx[i + 1] / secant
        radius = alpha * alpha + beta * beta

        if radius > 9:
            scale = 3 / radius.sqrt()
            dydx[i] = scale * alpha * secant
            dydx[i + 1] = scale * beta * secant

    return dydx
