from ._interpolation_error import InterpolationError


class InvalidValueError(InterpolationError):
    """Raised for NaN, infinite or malformed sample values."""

    def __init__(self, description: str):
        super().__init__(f"Invalid value: {description}")
        self.description = description

    def _payload(self) -> tuple:
        return (self.description,)
