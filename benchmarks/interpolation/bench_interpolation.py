"""Benchmarks for interpolation fitting and evaluation.

This module times the three torchsmooth engines (natural cubic spline,
PCHIP, Akima) against their scipy.interpolate counterparts.
"""

from __future__ import annotations

import time
from typing import Any, Callable

import numpy as np
import torch

# scipy imports - handle optional dependency
try:
    from scipy import interpolate as scipy_interpolate

    SCIPY_AVAILABLE = True
except ImportError:
    SCIPY_AVAILABLE = False

from torchsmooth.interpolation import (
    akima_evaluate,
    akima_fit,
    cubic_spline_evaluate,
    cubic_spline_fit,
    interpolated,
    pchip_evaluate,
    pchip_fit,
)

ENGINES = {
    "cubic_spline": (cubic_spline_fit, cubic_spline_evaluate),
    "pchip": (pchip_fit, pchip_evaluate),
    "akima": (akima_fit, akima_evaluate),
}


def _scipy_fit(method: str, x: np.ndarray, y: np.ndarray) -> Callable:
    if method == "cubic_spline":
        return scipy_interpolate.CubicSpline(x, y, bc_type="natural")
    if method == "pchip":
        return scipy_interpolate.PchipInterpolator(x, y)
    return scipy_interpolate.Akima1DInterpolator(x, y)


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 3,
    iterations: int = 10,
    **kwargs: Any,
) -> dict[str, float]:
    """Run a simple benchmark on a function.

    Returns
    -------
    dict
        Mean, standard deviation, minimum and maximum time in seconds.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = []
    for _ in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times.append(time.perf_counter() - start)

    return {
        "mean": np.mean(times),
        "std": np.std(times),
        "min": np.min(times),
        "max": np.max(times),
    }


def format_time(seconds: float) -> str:
    """Format time in appropriate units."""
    if seconds < 1e-6:
        return f"{seconds * 1e9:.3f}ns"
    elif seconds < 1e-3:
        return f"{seconds * 1e6:.3f}us"
    elif seconds < 1:
        return f"{seconds * 1e3:.3f}ms"
    else:
        return f"{seconds:.3f}s"


def print_comparison(
    name: str,
    ts_time: dict[str, float],
    scipy_time: dict[str, float] | None = None,
) -> None:
    """Print benchmark comparison results."""
    print(f"\n{name}")
    print("-" * len(name))
    print(
        f"  torchsmooth: {format_time(ts_time['mean'])} +/- {format_time(ts_time['std'])}"
    )
    if scipy_time is not None:
        print(
            f"  scipy:       {format_time(scipy_time['mean'])} +/- {format_time(scipy_time['std'])}"
        )
        ratio = scipy_time["mean"] / ts_time["mean"]
        if ratio >= 1:
            print(f"  Speedup:     {ratio:.2f}x faster")
        else:
            print(f"  Speedup:     {1 / ratio:.2f}x slower")


def _samples(n_points: int) -> tuple[torch.Tensor, torch.Tensor]:
    generator = torch.Generator().manual_seed(0)
    gaps = 0.1 + torch.rand(n_points - 1, generator=generator, dtype=torch.float64)
    x = torch.cat([torch.zeros(1, dtype=torch.float64), torch.cumsum(gaps, 0)])
    y = torch.sin(x) + 0.1 * torch.randn(
        n_points, generator=generator, dtype=torch.float64
    )
    return x, y


class BenchInterpolation:
    """Benchmarks for interpolation engines."""

    def __init__(self, warmup: int = 3, iterations: int = 10):
        self.warmup = warmup
        self.iterations = iterations

    def _bench(
        self, func: Callable, *args: Any, **kwargs: Any
    ) -> dict[str, float]:
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_fit(self, method: str, n_points: int = 1000) -> None:
        """Benchmark fitting a spline to ``n_points`` samples."""
        fit, _ = ENGINES[method]
        x, y = _samples(n_points)

        ts_time = self._bench(fit, x, y)

        scipy_time = None
        if SCIPY_AVAILABLE:
            scipy_time = self._bench(_scipy_fit, method, x.numpy(), y.numpy())

        print_comparison(f"{method} fit (n={n_points})", ts_time, scipy_time)

    def bench_evaluate(
        self, method: str, n_points: int = 1000, n_queries: int = 100000
    ) -> None:
        """Benchmark evaluating a fitted spline at ``n_queries`` points."""
        fit, evaluate = ENGINES[method]
        x, y = _samples(n_points)
        t = torch.linspace(x[0].item(), x[-1].item(), n_queries, dtype=torch.float64)

        spline = fit(x, y)
        ts_time = self._bench(evaluate, spline, t)

        scipy_time = None
        if SCIPY_AVAILABLE:
            reference = _scipy_fit(method, x.numpy(), y.numpy())
            scipy_time = self._bench(reference, t.numpy())

        print_comparison(
            f"{method} evaluate (n={n_points}, queries={n_queries})",
            ts_time,
            scipy_time,
        )

    def bench_interpolated(self, method: str, n_points: int = 100) -> None:
        """Benchmark the one-call smoothing path with 100 output samples."""
        x, y = _samples(n_points)
        points = torch.stack([x, y], dim=1)

        ts_time = self._bench(interpolated, points, method, 100)

        print_comparison(f"{method} interpolated (n={n_points})", ts_time)

    def run_all(self) -> None:
        """Run all interpolation benchmarks."""
        print("=" * 60)
        print("INTERPOLATION BENCHMARKS")
        print("=" * 60)

        print("\n--- Fitting ---")
        for method in ENGINES:
            self.bench_fit(method)

        print("\n--- Evaluation ---")
        for method in ENGINES:
            self.bench_evaluate(method)

        print("\n--- Smoothing ---")
        for method in ENGINES:
            self.bench_interpolated(method)

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying sample counts."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        # PCHIP limiting and the tridiagonal solve are sequential in n
        for method in ENGINES:
            print(f"\n--- Sample Count Scaling ({method}) ---")
            for n_points in [10, 100, 1000, 10000]:
                self.bench_fit(method, n_points=n_points)


if __name__ == "__main__":
    bench = BenchInterpolation(warmup=5, iterations=20)
    bench.run_all()
    print("\n")
    bench.run_scaling()
