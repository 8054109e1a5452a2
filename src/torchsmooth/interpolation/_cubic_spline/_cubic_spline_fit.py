from __future__ import annotations

from typing import TYPE_CHECKING

import torch
from torch import Tensor

from .._solve_tridiagonal import solve_tridiagonal
from .._validate_points import validate_points

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def cubic_spline_fit(
    x: Tensor,
    y: Tensor,
) -> CubicSpline:
    """
    Fit a natural cubic spline.

    Parameters
    ----------
    x : Tensor
        Sample x-values, shape (n,), any order.
    y : Tensor
        Sample values, shape (n,).

    Returns
    -------
    CubicSpline
        Spline through the samples sorted by x.

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
    The second derivatives ``m`` vanish at both ends. For n > 2 the
    interior ones solve

        h[i-1]*m[i-1] + 2*(h[i-1] + h[i])*m[i] + h[i]*m[i+1]
            = 6*(delta[i] - delta[i-1])

    with widths ``h`` and secants ``delta``. Two samples give the secant
    line without a solve.
    """
    x, y = validate_points(x, y)

    h = x[1:] - x[:-1]
    delta = (y[1:] - y[:-1]) / h

    m = torch.zeros_like(y)
    if x.shape[0] > 2:
        m[1:-1] = solve_tridiagonal(
            2 * (h[:-1] + h[1:]),
            h[1:-1],
            h[1:-1],
            6 * (delta[1:] - delta[:-1]),
        )

    m_left = m[:-1]
    m_right = m[1:]

    coefficients = torch.stack(
        [
            y[:-1],
            delta - h * (2 * m_left + m_right) / 6,
            m_left / 2,
            (m_right - m_left) / (6 * h),
        ],
        dim=1,
    )

    from ._cubic_spline import CubicSpline

    return CubicSpline(knots=x, coefficients=coefficients, batch_size=[])
