"""Base exception for interpolation errors."""


class InterpolationError(ValueError):
    """Base exception for all interpolation construction errors.

    Subclasses carry the offending quantity as attributes and compare
    equal when both kind and payload match.
    """

    def _payload(self) -> tuple:
        return ()

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._payload() == other._payload()

    def __hash__(self):
        return hash((type(self), self._payload()))
