"""Monotonicity-preserving cubic Hermite interpolation."""

from typing import Callable, Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._pchip_evaluate import pchip_evaluate
from ._pchip_fit import pchip_fit


@tensorclass
class PCHIPSpline:
    """Cubic Hermite curve with Fritsch-Carlson slopes.

    Between two samples the curve never leaves the range of their values,
    so monotone data gives a monotone curve.

    Attributes
    ----------
    knots : Tensor
        Sorted sample x-values, shape (n,).
    y : Tensor
        Sample values, shape (n,).
    dydx : Tensor
        Slope of the curve at each knot, shape (n,).
    """

    knots: Tensor
    y: Tensor
    dydx: Tensor


def pchip(
    x: Tensor,
    y: Tensor,
) -> Callable[[Union[Tensor, float]], Tensor]:
    """Fit a PCHIP curve and return it as a function of t.

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)
    >>> y = torch.tensor([0.0, 0.0, 1.0, 1.0], dtype=torch.float64)
    >>> pchip(x, y)(torch.tensor([0.5, 1.5, 2.5]))
    tensor([0.0000, 0.5000, 1.0000], dtype=torch.float64)
    """
    spline = pchip_fit(x, y)

    def evaluate(t):
        return pchip_evaluate(spline, t)

    return evaluate
