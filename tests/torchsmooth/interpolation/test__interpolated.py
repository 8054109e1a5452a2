"""Tests for the one-call smoothing helpers."""

import pytest
import torch

TEST_X = [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]
TEST_Y = [1.0, 2.0, 1.5, 3.0, 2.5, 4.0]


class TestInterpolated:
    @pytest.mark.parametrize("method", ["cubic_spline", "pchip", "akima"])
    def test_generates_count_points(self, method):
        from torchsmooth.interpolation import interpolated

        samples = interpolated(list(zip(TEST_X, TEST_Y)), method, 50)

        assert samples.x.shape == (50,)
        assert samples.x[0].item() == TEST_X[0]
        assert samples.x[-1].item() == TEST_X[-1]

    def test_matches_interpolator(self):
        from torchsmooth.interpolation import interpolated, interpolator

        points = list(zip(TEST_X, TEST_Y))

        samples = interpolated(points, "akima", 9)
        expected = interpolator(points, "akima").generate_sequence(9)

        assert torch.equal(samples.x, expected.x)
        assert torch.equal(samples.y, expected.y)

    def test_unsorted_input(self):
        from torchsmooth.interpolation import interpolated

        points = list(zip(TEST_X, TEST_Y))

        forward = interpolated(points, "pchip", 13)
        backward = interpolated(points[::-1], "pchip", 13)

        assert torch.equal(forward.y, backward.y)

    def test_raises_on_invalid_data(self):
        from torchsmooth.interpolation import DuplicateXValuesError, interpolated

        with pytest.raises(DuplicateXValuesError):
            interpolated([(1.0, 1.0), (1.0, 2.0), (2.0, 0.0)], "cubic_spline", 10)


class TestInterpolatedUnchecked:
    def test_empty_on_invalid_data(self):
        from torchsmooth.interpolation import (
            InterpolationWarning,
            interpolated_unchecked,
        )

        with pytest.warns(InterpolationWarning):
            samples = interpolated_unchecked([(1.0, 1.0)], "pchip", 10)

        assert samples.x.numel() == 0
        assert samples.y.numel() == 0

    def test_valid_data(self):
        from torchsmooth.interpolation import interpolated_unchecked

        samples = interpolated_unchecked(
            list(zip(TEST_X, TEST_Y)), "cubic_spline", 10
        )

        assert samples.x.shape == (10,)
        assert samples.y[0].item() == 1.0
