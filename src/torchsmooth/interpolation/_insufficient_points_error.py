from ._interpolation_error import InterpolationError


class InsufficientPointsError(InterpolationError):
    """Raised when fewer samples are supplied than a curve needs."""

    def __init__(self, count: int, required: int = 2):
        super().__init__(
            f"Need at least {required} points, got {count}"
        )
        self.count = count
        self.required = required

    def _payload(self) -> tuple:
        return (self.count, self.required)
