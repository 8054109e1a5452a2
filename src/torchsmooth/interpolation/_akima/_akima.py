"""Akima spline interpolation."""

from typing import Callable, Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._akima_evaluate import akima_evaluate
from ._akima_fit import akima_fit


@tensorclass
class AkimaSpline:
    """Akima cubic Hermite interpolant.

    Node derivatives are local weighted averages of neighbouring secants,
    so a single outlier only disturbs the curve near itself. The curve is
    C1 continuous.

    Attributes
    ----------
    knots : Tensor
        Sorted sample x-values, shape (n,).
    y : Tensor
        Sample values, shape (n,).
    dydx : Tensor
        Akima slope at each knot, shape (n,).
    """

    knots: Tensor
    y: Tensor
    dydx: Tensor


def akima(
    x: Tensor,
    y: Tensor,
) -> Callable[[Union[Tensor, float]], Tensor]:
    """Fit an Akima spline and return it as a function of t.

    Examples
    --------
    >>> x = torch.arange(5, dtype=torch.float64)
    >>> y = torch.tensor([1.0, 1.0, 10.0, 1.0, 1.0], dtype=torch.float64)
    >>> akima(x, y)(torch.tensor([0.5, 3.5]))
    tensor([0.0625, 0.0625], dtype=torch.float64)
    """
    spline = akima_fit(x, y)
    return lambda t: akima_evaluate(spline, t)
