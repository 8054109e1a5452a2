from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._hermite_evaluate import hermite_evaluate

if TYPE_CHECKING:
    from ._pchip import PCHIPSpline


def pchip_evaluate(
    spline: PCHIPSpline,
    t: Union[Tensor, float],
) -> Tensor:
    """Evaluate a PCHIP curve at ``t``, clamping to the knot range."""
    return hermite_evaluate(spline.knots, spline.y, spline.dydx, t)
