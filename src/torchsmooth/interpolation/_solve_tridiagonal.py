import torch
from torch import Tensor


def solve_tridiagonal(
    diag: Tensor,
    upper: Tensor,
    lower: Tensor,
    rhs: Tensor,
) -> Tensor:
    """
    Solve ``A @ x = rhs`` for a tridiagonal ``A`` (Thomas algorithm).

    Row ``i`` of ``A`` is ``lower[i-1]``, ``diag[i]``, ``upper[i]`` on
    columns ``i-1``, ``i``, ``i+1``.

    Parameters
    ----------
    diag : Tensor
        Shape (n,).
    upper, lower : Tensor
        Shape (n - 1,). Empty when n = 1.
    rhs : Tensor
        Shape (n,).

    Returns
    -------
    Tensor
        Shape (n,).

    Notes
    -----
    Forward elimination produces the pivots ``p``, the scaled upper
    diagonal ``mu[i] = upper[i] / p[i]`` and the scaled right-hand side
    ``z``; back substitution is ``x[i] = z[i] - mu[i] * x[i + 1]``.
    There is no pivoting, so ``A`` should be diagonally dominant, as the
    natural spline system always is.
    """
    n = diag.shape[0]

    pivot = diag[0]
    z = [rhs[0] / pivot]
    mu = []

    for i in range(1, n):
        mu.append(upper[i - 1] / pivot)
        pivot = diag[i] - lower[i - 1] * mu[-1]
        z.append((rhs[i] - lower[i - 1] * z[-1]) / pivot)

    solution = [z[-1]]
    for i in reversed(range(n - 1)):
        solution.append(z[i] - mu[i] * solution[-1])

    return torch.stack(solution[::-1])
