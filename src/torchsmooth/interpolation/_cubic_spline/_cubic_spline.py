"""Natural cubic spline interpolation."""

from typing import Callable, Union

from tensordict.tensorclass import tensorclass
from torch import Tensor

from ._cubic_spline_evaluate import cubic_spline_evaluate
from ._cubic_spline_fit import cubic_spline_fit


@tensorclass
class CubicSpline:
    """C2 piecewise cubic with zero curvature at both ends.

    Attributes
    ----------
    knots : Tensor
        Sorted sample x-values, shape (n,).
    coefficients : Tensor
        Shape (n - 1, 4). Row ``i`` holds ``[a, b, c, d]`` of

            S_i(t) = a + b*s + c*s**2 + d*s**3,  s = t - knots[i]

        valid on ``[knots[i], knots[i + 1]]``.
    """

    knots: Tensor
    coefficients: Tensor


def cubic_spline(
    x: Tensor,
    y: Tensor,
) -> Callable[[Union[Tensor, float]], Tensor]:
    """Fit a natural cubic spline and return it as a function of t.

    Parameters
    ----------
    x, y : Tensor
        Samples, shape (n,), in any order; see ``cubic_spline_fit``.

    Returns
    -------
    Callable[[Tensor], Tensor]
        ``t -> cubic_spline_evaluate(spline, t)``.

    Examples
    --------
    >>> x = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
    >>> y = torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64)
    >>> cubic_spline(x, y)(torch.tensor([0.5, 1.5]))
    tensor([0.6875, 0.6875], dtype=torch.float64)
    """
    spline = cubic_spline_fit(x, y)

    def evaluate(t):
        return cubic_spline_evaluate(spline, t)

    return evaluate
