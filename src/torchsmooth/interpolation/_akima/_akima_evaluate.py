from __future__ import annotations

from typing import TYPE_CHECKING, Union

from torch import Tensor

from .._hermite_evaluate import hermite_evaluate

if TYPE_CHECKING:
    from ._akima import AkimaSpline


def akima_evaluate(
    spline: AkimaSpline,
    t: Union[Tensor, float],
) -> Tensor:
    """Evaluate an Akima spline at ``t``, clamping to the knot range."""
    return hermite_evaluate(spline.knots, spline.y, spline.dydx, t)
