class InterpolationWarning(UserWarning):
    """Warning when a best-effort construction degrades to an invalid interpolator."""

    pass
