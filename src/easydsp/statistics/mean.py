"""Arithmetic mean of a numeric sample."""

import numpy as np

from .errors import EmptyInputError
from .utils import NumericInput, to_numpy, value_type


def mean(values: NumericInput) -> np.floating:
    """Return the arithmetic mean of a non-empty sample in its element type."""
    vals = to_numpy(values)
    if vals.size == 0:
        raise EmptyInputError()
    scalar = value_type(vals)
    return scalar(np.sum(vals, dtype=vals.dtype) / scalar(vals.size))


__all__ = ["mean"]
