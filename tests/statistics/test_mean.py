"""Unit tests for the mean and sample coercion helpers."""

import numpy as np
import pytest

from easydsp.statistics import EmptyInputError, mean
from easydsp.statistics.utils import to_numpy, value_type


def test_mean():
    """Test the arithmetic mean of simple samples."""
    assert mean([2, 4, 4, 4, 5, 5, 7, 9]) == pytest.approx(5.0)
    assert mean((1.5,)) == pytest.approx(1.5)
    assert mean(np.arange(10)) == pytest.approx(4.5)


def test_mean_empty():
    """Test that the mean of an empty sample is rejected."""
    with pytest.raises(EmptyInputError):
        mean([])


def test_to_numpy():
    """Test coercion of common iterables into 1D float arrays."""
    assert isinstance(to_numpy([1, 2, 3]), np.ndarray)
    assert to_numpy((1, 2, 3)).dtype == np.float64
    assert to_numpy(x for x in range(3)).shape == (3,)
    assert to_numpy([True, False]).dtype == np.float64
    assert to_numpy(np.zeros(3, dtype=np.float32)).dtype == np.float32
    assert to_numpy([]).size == 0

    with pytest.raises(ValueError, match="1D"):
        to_numpy([[1, 2], [3, 4]])
    with pytest.raises(TypeError):
        to_numpy(["x"])


def test_value_type():
    """Test that the element type follows the coerced array."""
    assert value_type(to_numpy([1.0])) is np.float64
    assert value_type(to_numpy(np.ones(2, dtype=np.float32))) is np.float32
