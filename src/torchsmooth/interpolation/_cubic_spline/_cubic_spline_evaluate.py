from __future__ import annotations

from typing import TYPE_CHECKING, Union

import torch
from torch import Tensor

from .._segment_index import clamp_to_domain, segment_index

if TYPE_CHECKING:
    from ._cubic_spline import CubicSpline


def cubic_spline_evaluate(
    spline: CubicSpline,
    t: Union[Tensor, float],
) -> Tensor:
    """
    Evaluate a natural cubic spline.

    Parameters
    ----------
    spline : CubicSpline
        Result of ``cubic_spline_fit``.
    t : Tensor or float
        Query positions, any shape. Positions before the first knot or
        after the last are moved onto it.

    Returns
    -------
    Tensor
        Values with the shape of ``t`` (0-d for a scalar query).
    """
    knots = spline.knots

    t = torch.as_tensor(t, dtype=knots.dtype, device=knots.device)
    flat = clamp_to_domain(knots, t.reshape(-1))

    index = segment_index(knots, flat)
    a, b, c, d = spline.coefficients[index].unbind(dim=-1)
    s = flat - knots[index]

    values = a + s * (b + s * (c + s * d))

    return values.reshape(t.shape)
