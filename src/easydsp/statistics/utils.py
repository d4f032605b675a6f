"""Common helper functions for statistical routines."""

from collections.abc import Iterable
from typing import TypeAlias, cast

import numpy as np
import numpy.typing as npt

FloatArray: TypeAlias = npt.NDArray[np.floating]
NumericInput: TypeAlias = npt.ArrayLike | Iterable[float]


def to_numpy(values: NumericInput) -> FloatArray:
    """Coerce the input sequence into a 1D NumPy array of floating point values.

    Floating dtypes are kept as-is so results stay in the caller's precision.
    Integral and boolean samples are promoted to ``float64``.
    """
    if not isinstance(values, np.ndarray):
        if not isinstance(values, (list, tuple)):
            values = list(values)  # type: ignore[arg-type]
        values = np.asarray(values)
    if values.ndim != 1:
        raise ValueError("Values must be a 1D sequence.")
    if np.issubdtype(values.dtype, np.floating):
        return cast(FloatArray, values)
    if np.issubdtype(values.dtype, np.integer) or values.dtype == np.bool_:
        return cast(FloatArray, values.astype(np.float64))
    if values.size == 0:
        return np.empty(0, dtype=np.float64)
    raise TypeError(f"Values must be numeric, got dtype {values.dtype}.")


def value_type(values: FloatArray) -> type[np.floating]:
    """Return the scalar type the statistics of ``values`` are computed in."""
    return cast(type[np.floating], values.dtype.type)


__all__ = ["FloatArray", "NumericInput", "to_numpy", "value_type"]
