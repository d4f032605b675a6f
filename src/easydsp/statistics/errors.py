"""Exceptions raised by the statistical routines."""


class StatisticsError(ValueError):
    """Base class for invalid inputs to the statistical routines."""


class EmptyInputError(StatisticsError):
    """Raised when a statistic is requested for a sample with no elements."""

    def __init__(self, message: str = "values must contain at least one element.") -> None:
        super().__init__(message)


class InvalidOrderError(StatisticsError):
    """Raised when a moment order is not a positive integer."""

    def __init__(self, order: object) -> None:
        super().__init__(f"Moment order must be a positive integer, got {order!r}.")
        self.order = order


__all__ = ["StatisticsError", "EmptyInputError", "InvalidOrderError"]
