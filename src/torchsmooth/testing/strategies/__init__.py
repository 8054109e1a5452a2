"""Hypothesis strategies for interpolation testing."""

from ._sample_sets import sample_sets

__all__ = [
    "sample_sets",
]
