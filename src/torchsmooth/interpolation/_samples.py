import torch
from tensordict.tensorclass import tensorclass
from torch import Tensor


@tensorclass
class Samples:
    """Ordered (x, y) samples produced by evaluating an interpolant.

    Attributes
    ----------
    x : Tensor
        Sample positions, shape (count,). Non-decreasing.
    y : Tensor
        Interpolated values at ``x``, shape (count,).
    """

    x: Tensor
    y: Tensor


def empty_samples() -> Samples:
    """Return a zero-length ``Samples``."""
    return Samples(
        x=torch.empty(0, dtype=torch.float64),
        y=torch.empty(0, dtype=torch.float64),
        batch_size=[0],
    )
