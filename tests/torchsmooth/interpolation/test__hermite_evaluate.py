"""Tests for segment lookup and cubic Hermite evaluation."""

import torch


class TestSegmentIndex:
    def test_segment_index(self):
        """Test the segment chosen for interior, knot and end queries."""
        from torchsmooth.interpolation._segment_index import segment_index

        knots = torch.tensor([0.0, 1.0, 2.0, 3.0], dtype=torch.float64)
        t = torch.tensor([0.0, 1.0, 2.0, 3.0, 0.5, 2.9], dtype=torch.float64)

        index = segment_index(knots, t)

        assert index.tolist() == [0, 1, 2, 2, 0, 2]

    def test_clamp_to_domain(self):
        """Test that queries saturate to the knot range."""
        from torchsmooth.interpolation._segment_index import clamp_to_domain

        knots = torch.tensor([-1.0, 0.0, 4.0], dtype=torch.float64)
        t = torch.tensor([-5.0, -1.0, 2.0, 4.0, 9.0], dtype=torch.float64)

        torch.testing.assert_close(
            clamp_to_domain(knots, t),
            torch.tensor([-1.0, -1.0, 2.0, 4.0, 4.0], dtype=torch.float64),
        )


class TestHermiteEvaluate:
    def test_reproduces_linear_data(self):
        """Test that consistent slopes reproduce a straight line."""
        from torchsmooth.interpolation import hermite_evaluate

        knots = torch.tensor([0.0, 0.5, 2.0, 3.0], dtype=torch.float64)
        y = 3 * knots - 1
        dydx = torch.full_like(knots, 3.0)

        t = torch.linspace(0, 3, 31, dtype=torch.float64)

        torch.testing.assert_close(
            hermite_evaluate(knots, y, dydx, t), 3 * t - 1, atol=1e-12, rtol=0
        )

    def test_exact_at_endpoints(self):
        """Test that knots return their values exactly."""
        from torchsmooth.interpolation import hermite_evaluate

        knots = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
        y = torch.tensor([0.3, -1.7, 2.9], dtype=torch.float64)
        dydx = torch.tensor([10.0, -4.0, 7.0], dtype=torch.float64)

        values = hermite_evaluate(knots, y, dydx, knots)

        assert values.tolist() == y.tolist()

    def test_cubic_reproduction(self):
        """Test that exact derivatives reproduce a cubic polynomial."""
        from torchsmooth.interpolation import hermite_evaluate

        knots = torch.tensor([-1.0, 0.0, 1.5, 2.0], dtype=torch.float64)
        y = knots**3 - 2 * knots
        dydx = 3 * knots**2 - 2

        t = torch.linspace(-1, 2, 25, dtype=torch.float64)

        torch.testing.assert_close(
            hermite_evaluate(knots, y, dydx, t), t**3 - 2 * t
        )

    def test_clamps_out_of_range(self):
        """Test that queries outside the knots take the end values."""
        from torchsmooth.interpolation import hermite_evaluate

        knots = torch.tensor([0.0, 1.0], dtype=torch.float64)
        y = torch.tensor([2.0, 6.0], dtype=torch.float64)
        dydx = torch.tensor([50.0, -50.0], dtype=torch.float64)

        values = hermite_evaluate(knots, y, dydx, torch.tensor([-3.0, 8.0]))

        assert values.tolist() == [2.0, 6.0]

    def test_preserves_query_shape(self):
        """Test that multi-dimensional and scalar queries keep their shape."""
        from torchsmooth.interpolation import hermite_evaluate

        knots = torch.tensor([0.0, 1.0, 2.0], dtype=torch.float64)
        y = torch.tensor([0.0, 1.0, 0.0], dtype=torch.float64)
        dydx = torch.zeros(3, dtype=torch.float64)

        assert hermite_evaluate(knots, y, dydx, torch.rand(2, 3, 4)).shape == (
            2,
            3,
            4,
        )
        assert hermite_evaluate(knots, y, dydx, 0.5).shape == ()
