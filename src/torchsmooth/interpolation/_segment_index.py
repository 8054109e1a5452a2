"""Interval lookup shared by every spline evaluator."""

import torch
from torch import Tensor


def clamp_to_domain(knots: Tensor, t: Tensor) -> Tensor:
    """Saturate query points to ``[knots[0], knots[-1]]``."""
    return torch.clamp(t, knots[0], knots[-1])


def segment_index(knots: Tensor, t: Tensor) -> Tensor:
    """
    Find the segment containing each query point.

    Parameters
    ----------
    knots : Tensor
        Breakpoints, shape (n_knots,). Strictly increasing, n_knots >= 2.
    t : Tensor
        Query points, shape (m,), already clamped to the knot range.

    Returns
    -------
    Tensor
        int64 indices, shape (m,). Entry ``i`` is the largest index with
        ``knots[i] <= t``, capped at ``n_knots - 2`` so that the right
        endpoint falls in the last segment.
    """
    n_segments = knots.shape[0] - 1

    # searchsorted is a binary search; right=True puts a query that equals
    # a knot in the segment starting at that knot.
    index = torch.searchsorted(knots, t.contiguous(), right=True) - 1

    return torch.clamp(index, 0, n_segments - 1)
