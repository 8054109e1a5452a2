"""Cubic Hermite evaluation shared by the PCHIP and Akima engines."""

from typing import Union

import torch
from torch import Tensor

from ._segment_index import clamp_to_domain, segment_index


def hermite_evaluate(
    knots: Tensor,
    y: Tensor,
    dydx: Tensor,
    t: Union[Tensor, float],
) -> Tensor:
    """
    Evaluate the cubic Hermite curve through ``(knots, y)`` with slopes ``dydx``.

    On ``[knots[i], knots[i+1]]``, with width ``w`` and ``u = (t - knots[i]) / w``::

        (1 + 2u)(1 - u)^2 * y[i]  +  u(1 - u)^2 * w * dydx[i]
          + u^2(3 - 2u) * y[i+1]  +  u^2(u - 1) * w * dydx[i+1]

    Parameters
    ----------
    knots : Tensor
        Sorted, distinct x-values, shape (n,), n >= 2.
    y : Tensor
        Values at the knots, shape (n,).
    dydx : Tensor
        Slopes at the knots, shape (n,).
    t : Tensor or float
        Query positions, any shape, clamped to ``[knots[0], knots[-1]]``.

    Returns
    -------
    Tensor
        Values with the shape of ``t``.
    """
    t = torch.as_tensor(t, dtype=knots.dtype, device=knots.device)
    flat = clamp_to_domain(knots, t.reshape(-1))

    left = segment_index(knots, flat)
    right = left + 1

    width = knots[right] - knots[left]
    u = (flat - knots[left]) / width
    v = 1 - u

    values = (
        (1 + 2 * u) * v * v * y[left]
        + u * v * v * width * dydx[left]
        + u * u * (3 - 2 * u) * y[right]
        + u * u * (u - 1) * width * dydx[right]
    )

    return values.reshape(t.shape)
