"""Exceptions raised by chart models."""


class ChartError(Exception):
    """Base class for chart errors."""


class LengthMismatchError(ChartError, ValueError):
    """Parallel input sequences differ in length."""

    def __init__(self, x_count: int, y_count: int):
        super().__init__(
            f"x and y sequences differ in length ({x_count} != {y_count})"
        )
        self.x_count = x_count
        self.y_count = y_count


class InvalidValueError(ChartError, ValueError):
    """A value is negative or not finite where proportions are computed."""
