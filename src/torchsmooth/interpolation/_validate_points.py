"""Sample validation and normalization shared by every engine."""

from collections.abc import Mapping
from typing import Any, Iterable, NamedTuple, Tuple, Union

import torch
from torch import Tensor

from ._duplicate_x_values_error import DuplicateXValuesError
from ._insufficient_points_error import InsufficientPointsError
from ._invalid_value_error import InvalidValueError

# Adjacent sorted x-values closer than this are treated as the same node.
DUPLICATE_X_TOLERANCE = 1e-15


class Sample(NamedTuple):
    """A single (x, y) observation."""

    x: float
    y: float


Points = Union[Tensor, Iterable[Any]]


def as_tensors(points: Points) -> Tuple[Tensor, Tensor]:
    """
    Split a collection of points into parallel x and y tensors.

    Parameters
    ----------
    points : Tensor or iterable
        Either a tensor of shape (n, 2), or an iterable whose items are
        ``Sample`` tuples, ``(x, y)`` pairs, mappings with ``"x"`` and
        ``"y"`` keys, or objects exposing ``x`` and ``y`` attributes.

    Returns
    -------
    x, y : Tensor
        float64 tensors of shape (n,), in input order.

    Raises
    ------
    InvalidValueError
        If a point cannot be read as two real numbers.
    """
    if isinstance(points, Tensor):
        if points.numel() == 0:
            points = points.reshape(0, 2)
        if points.dim() != 2 or points.shape[1] != 2:
            raise InvalidValueError(
                f"points tensor must have shape (n, 2), got {tuple(points.shape)}"
            )
        points = points.to(torch.float64)
        return points[:, 0].clone(), points[:, 1].clone()

    try:
        iterator = iter(points)
    except TypeError as error:
        raise InvalidValueError(
            f"points must be iterable, got {type(points).__name__}"
        ) from error

    xs = []
    ys = []
    for point in iterator:
        try:
            if isinstance(point, Mapping):
                x, y = point["x"], point["y"]
            elif hasattr(point, "x") and hasattr(point, "y"):
                x, y = point.x, point.y
            else:
                x, y = point
            xs.append(float(x))
            ys.append(float(y))
        except (KeyError, OverflowError, TypeError, ValueError) as error:
            raise InvalidValueError(f"malformed point {point!r}") from error

    return (
        torch.tensor(xs, dtype=torch.float64),
        torch.tensor(ys, dtype=torch.float64),
    )


def _as_column(values: Any, name: str) -> Tensor:
    try:
        column = torch.as_tensor(values, dtype=torch.float64)
    except (TypeError, ValueError, RuntimeError) as error:
        raise InvalidValueError(
            f"{name} values are not real numbers"
        ) from error

    if column.dim() != 1:
        raise InvalidValueError(
            f"{name} must be one-dimensional, got shape {tuple(column.shape)}"
        )

    return column


def validate_points(x: Any, y: Any) -> Tuple[Tensor, Tensor]:
    """
    Validate raw samples and sort them by x.

    Parameters
    ----------
    x : Tensor or sequence of float
        Sample x-coordinates, any order.
    y : Tensor or sequence of float
        Sample values, same length as x.

    Returns
    -------
    x, y : Tensor
        float64 tensors of shape (n,), sorted ascending by x.

    Raises
    ------
    InvalidValueError
        If x and y differ in length, or any value is NaN or infinite.
    InsufficientPointsError
        If fewer than 2 samples are supplied.
    DuplicateXValuesError
        If two samples lie within 1e-15 of the same x. The error reports
        the smaller of the pair.
    """
    x = _as_column(x, "x")
    y = _as_column(y, "y")

    if x.shape != y.shape:
        raise InvalidValueError(
            f"x and y must have the same length, got {x.shape[0]} and {y.shape[0]}"
        )

    n = x.shape[0]
    if n < 2:
        raise InsufficientPointsError(n, required=2)

    # Checked in input order, before sorting.
    finite_x = torch.isfinite(x)
    finite_y = torch.isfinite(y)
    invalid = ~(finite_x & finite_y)
    if invalid.any():
        i = int(torch.nonzero(invalid)[0])
        if not finite_x[i]:
            raise InvalidValueError("x value is NaN or Infinite")
        raise InvalidValueError("y value is NaN or Infinite")

    x_sorted, order = torch.sort(x, stable=True)
    y_sorted = y[order]

    duplicate = (x_sorted[1:] - x_sorted[:-1]).abs() < DUPLICATE_X_TOLERANCE
    if duplicate.any():
        i = int(torch.nonzero(duplicate)[0])
        raise DuplicateXValuesError(x_sorted[i].item())

    return x_sorted, y_sorted
