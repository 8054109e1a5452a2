from ._interpolation_error import InterpolationError


class DuplicateXValuesError(InterpolationError):
    """Raised when two samples share an x-coordinate."""

    def __init__(self, x: float):
        super().__init__(f"Duplicate x value: {x}")
        self.x = x

    def _payload(self) -> tuple:
        return (self.x,)
