from typing import Tuple

import hypothesis.strategies
import torch


def _finite(
    min_value: float, max_value: float
) -> hypothesis.strategies.SearchStrategy[float]:
    return hypothesis.strategies.floats(
        min_value=min_value,
        max_value=max_value,
        allow_nan=False,
        allow_infinity=False,
    )


@hypothesis.strategies.composite
def sample_sets(
    draw: hypothesis.strategies.DrawFn,
    min_size: int = 2,
    max_size: int = 20,
    monotone: bool = False,
    shuffle: bool = True,
) -> Tuple[torch.Tensor, torch.Tensor]:
    """Generate valid sample sets as float64 ``(x, y)`` tensors.

    Consecutive x-values are between 0.1 and 10 apart. With ``monotone``
    the y-values are non-decreasing in x. With ``shuffle`` the pairs come
    back in random order.
    """
    n = draw(hypothesis.strategies.integers(min_size, max_size))

    start = draw(_finite(-100.0, 100.0))
    gaps = draw(
        hypothesis.strategies.lists(
            _finite(0.1, 10.0), min_size=n - 1, max_size=n - 1
        )
    )

    x = [start]
    for gap in gaps:
        x.append(x[-1] + gap)

    if monotone:
        first = draw(_finite(-100.0, 100.0))
        steps = draw(
            hypothesis.strategies.lists(
                _finite(0.0, 10.0), min_size=n - 1, max_size=n - 1
            )
        )
        y = [first]
        for step in steps:
            y.append(y[-1] + step)
    else:
        y = draw(
            hypothesis.strategies.lists(
                _finite(-100.0, 100.0), min_size=n, max_size=n
            )
        )

    pairs = list(zip(x, y))
    if shuffle:
        pairs = draw(hypothesis.strategies.permutations(pairs))

    return (
        torch.tensor([p[0] for p in pairs], dtype=torch.float64),
        torch.tensor([p[1] for p in pairs], dtype=torch.float64),
    )
