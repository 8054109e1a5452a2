from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._validate_points import validate_points

if TYPE_CHECKING:
    from ._akima import AkimaSpline

# Below this total weight both secant differences vanish (collinear data).
ZERO_WEIGHT_TOLERANCE = 1e-30


def akima_fit(
    x: Tensor,
    y: Tensor,
) -> AkimaSpline:
    """
    Fit an Akima spline to data points.

    Parameters
    ----------
    x : Tensor
        Sample x-coordinates, shape (n_points,), any order.
    y : Tensor
        Sample values, shape (n_points,).

    Returns
    -------
    AkimaSpline
        Fitted spline over the samples sorted by x.

    Raises
    ------
    InsufficientPointsError
        If fewer than 2 points are given.
    DuplicateXValuesError
        If two samples share an x-coordinate.
    InvalidValueError
        If any coordinate is NaN or infinite.

    Notes
    -----
    With secants m[i] = (y[i+1] - y[i]) / (x[i+1] - x[i]) extended by two
    extrapolated secants at each end, the derivative at knot i is

        d[i] = (w1 * m[i-1] + w2 * m[i]) / (w1 + w2)
        w1 = |m[i+1] - m[i]|,  w2 = |m[i-1] - m[i-2]|

    falling back to (m[i-1] + m[i]) / 2 when w1 + w2 vanishes.

    References
    ----------
    Akima, H. (1970). "A New Method of Interpolation and Smooth Curve
    Fitting Based on Local Procedures". Journal of the ACM. 17 (4): 589-602.
    """
    x, y = validate_points(x, y)
    n = x.shape[0]

    m = (y[1:] - y[:-1]) / (x[1:] - x[:-1])  # (n-1,)
    m_ext = _extend_secants(m)  # (n+3,)

    # Knot i sits at position i + 2 of the extended sequence
    m_left2 = m_ext[0:n]  # m[i-2]
    m_left = m_ext[1 : n + 1]  # m[i-1]
    m_right = m_ext[2 : n + 2]  # m[i]
    m_right2 = m_ext[3 : n + 3]  # m[i+1]

    w1 = torch.abs(m_right2 - m_right)
    w2 = torch.abs(m_left - m_left2)
    w_sum = w1 + w2

    collinear = w_sum < ZERO_WEIGHT_TOLERANCE
    w_sum_safe = torch.where(collinear, torch.ones_like(w_sum), w_sum)

    weighted = (w1 * m_left + w2 * m_right) / w_sum_safe
    average = (m_left + m_right) / 2

    d = torch.where(collinear, average, weighted)

    from ._akima import AkimaSpline

    return AkimaSpline(
        knots=x,
        y=y,
        dydx=d,
        batch_size=[],
    )


def _extend_secants(m: Tensor) -> Tensor:
    """
    Pad the secant sequence with two virtual secants at each end.

    Parameters
    ----------
    m : Tensor
        Secants, shape (n-1,)

    Returns
    -------
    Tensor
        ``[m[-2], m[-1], m[0], ..., m[n-2], m[n-1], m[n]]``, shape (n+3,).
        The virtual secants continue the second difference of the data
        (parabolic extrapolation); with a single secant they repeat it.
    """
    if m.shape[0] == 1:
        return m.repeat(5)

    m_minus1 = 2 * m[0] - m[1]
    m_minus2 = 2 * m_minus1 - m[0]
    m_plus1 = 2 * m[-1] - m[-2]
    m_plus2 = 2 * m_plus1 - m[-1]

    return torch.cat(
        [
            torch.stack([m_minus2, m_minus1]),
            m,
            torch.stack([m_plus1, m_plus2]),
        ]
    )
