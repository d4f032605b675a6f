"""Descriptive statistics for numeric samples."""

from .errors import EmptyInputError, InvalidOrderError, StatisticsError
from .mean import mean
from .moment import (
    MomentSummary,
    kurtosis,
    moment,
    nth_power,
    skewness,
    standard_deviation,
    summarize,
    variance,
)

__all__ = [
    "EmptyInputError",
    "InvalidOrderError",
    "MomentSummary",
    "StatisticsError",
    "kurtosis",
    "mean",
    "moment",
    "nth_power",
    "skewness",
    "standard_deviation",
    "summarize",
    "variance",
]
