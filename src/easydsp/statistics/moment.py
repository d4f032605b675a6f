r"""Central moments of a numeric sample.

The N-th central moment of a sample ``x`` with mean ``m`` is

.. math:: \frac{1}{n} \sum_i (x_i - m)^N

Powers are formed by repeated multiplication rather than ``**`` so the sign of
negative deviations is carried through odd orders exactly.
"""

import math
import numbers
from dataclasses import dataclass

import numpy as np

from .errors import EmptyInputError, InvalidOrderError
from .mean import mean as sample_mean
from .utils import FloatArray, NumericInput, to_numpy, value_type


def _validate_order(order: int) -> int:
    """Return ``order`` when it is a usable moment order."""
    if isinstance(order, bool) or not isinstance(order, numbers.Integral) or order < 1:
        raise InvalidOrderError(order)
    return int(order)


def nth_power(x, order: int):
    """Raise ``x`` to ``order`` using ``order - 1`` multiplications.

    Works element-wise when ``x`` is an array.
    """
    order = _validate_order(order)
    result = x
    for _ in range(order - 1):
        result = result * x
    return result


def _nth_moment(vals: FloatArray, order: int, center: float) -> np.floating:
    scalar = value_type(vals)
    deviations = vals - scalar(center)
    total = np.sum(nth_power(deviations, order), dtype=vals.dtype)
    return scalar(total / scalar(vals.size))


def moment(values: NumericInput, order: int, mean: float | None = None) -> np.floating:
    """Return the ``order``-th central moment of ``values``.

    Args:
        values: Finite, non-empty numeric sample.
        order: Positive moment order; 1 is always zero, 2 is the population variance.
        mean: Precomputed arithmetic mean of the *same* sample. It is trusted as given;
            passing the mean of another sample silently produces a meaningless result.

    Raises:
        EmptyInputError: When ``values`` has no elements.
        InvalidOrderError: When ``order`` is not a positive integer.
    """
    order = _validate_order(order)
    vals = to_numpy(values)
    if vals.size == 0:
        raise EmptyInputError()
    center = sample_mean(vals) if mean is None else mean
    return _nth_moment(vals, order, center)


def variance(values: NumericInput, mean: float | None = None) -> float:
    """Return the population variance (second central moment)."""
    return float(moment(values, 2, mean))


def standard_deviation(values: NumericInput, mean: float | None = None) -> float:
    """Return the population standard deviation."""
    return float(math.sqrt(max(variance(values, mean), 0.0)))


def skewness(values: NumericInput) -> float:
    """Return the third standardized moment."""
    vals = to_numpy(values)
    center = sample_mean(vals)
    var = float(_nth_moment(vals, 2, center))
    if var <= 0:
        return 0.0
    return float(_nth_moment(vals, 3, center)) / var**1.5


def kurtosis(values: NumericInput, fisher: bool = True) -> float:
    """Return the fourth standardized moment (Fisher excess by default)."""
    vals = to_numpy(values)
    center = sample_mean(vals)
    var = float(_nth_moment(vals, 2, center))
    if var <= 0:
        return 0.0
    kurt = float(_nth_moment(vals, 4, center)) / (var * var)
    if fisher:
        kurt -= 3.0
    return kurt


@dataclass(frozen=True)
class MomentSummary:
    """Bundle of moment-based descriptive statistics for a sample."""

    count: int
    mean: float
    variance: float
    standard_deviation: float
    skewness: float
    kurtosis: float
    central_moments: tuple[float, ...]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation of the summary."""
        return {
            "count": self.count,
            "mean": self.mean,
            "variance": self.variance,
            "standard_deviation": self.standard_deviation,
            "skewness": self.skewness,
            "kurtosis": self.kurtosis,
            "central_moments": {
                str(order): value for order, value in enumerate(self.central_moments, start=1)
            },
        }


def summarize(values: NumericInput, *, max_order: int = 4) -> MomentSummary:
    """Compute a consistent set of moment statistics for ``values``."""
    max_order = _validate_order(max_order)
    vals = to_numpy(values)
    if vals.size == 0:
        raise EmptyInputError()
    center = sample_mean(vals)
    central = tuple(float(_nth_moment(vals, order, center)) for order in range(1, max_order + 1))
    return MomentSummary(
        count=int(vals.size),
        mean=float(center),
        variance=variance(vals, center),
        standard_deviation=standard_deviation(vals, center),
        skewness=skewness(vals),
        kurtosis=kurtosis(vals),
        central_moments=central,
    )


__all__ = [
    "MomentSummary",
    "kurtosis",
    "moment",
    "nth_power",
    "skewness",
    "standard_deviation",
    "summarize",
    "variance",
]
