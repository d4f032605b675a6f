"""Unit tests for the gradient noise generator."""

import numpy as np
import pytest

from easydsp.noise import (
    CONTINUOUS,
    INTEGER,
    PERMUTATION,
    PerlinNoiseGenerator,
    fade,
    grad,
    gradient_noise,
    lerp,
)
from easydsp.noise.perlin import PERMUTATION_MASK


def test_permutation_table_layout():
    """Test that the table holds two copies of a permutation of 0..255."""
    assert len(PERMUTATION) == 512
    assert sorted(PERMUTATION[:256]) == list(range(256))
    assert PERMUTATION[:256] == PERMUTATION[256:]
    assert PERMUTATION[0] == 151
    assert isinstance(PERMUTATION, tuple)


def test_fade():
    """Test the quintic smoothstep endpoints and midpoint."""
    assert fade(0.0) == 0.0
    assert fade(1.0) == 1.0
    assert fade(0.5) == pytest.approx(0.5)
    assert fade(0.25) < 0.25
    np.testing.assert_allclose(fade(np.array([0.0, 1.0])), [0.0, 1.0])


def test_lerp():
    """Test linear interpolation weights."""
    assert lerp(0.0, 2.0, 6.0) == 2.0
    assert lerp(1.0, 2.0, 6.0) == 6.0
    assert lerp(0.25, 2.0, 6.0) == 3.0


def test_grad():
    """Test that the gradient sign follows the low bit of the hash."""
    assert grad(4, 0.3) == 0.3
    assert grad(7, 0.3) == -0.3
    np.testing.assert_array_equal(grad(np.array([2, 3]), np.array([1.0, 1.0])), [1.0, -1.0])


def test_gradient_noise_vanishes_on_lattice():
    """Test that noise is zero at integer coordinates."""
    np.testing.assert_array_equal(gradient_noise(np.arange(0.0, 600.0)), 0.0)
    assert gradient_noise(3.0) == 0.0


def test_gradient_noise_known_value():
    """Test a hand-computed sample in the first lattice cell."""
    # PERMUTATION[0] == 151 (odd), PERMUTATION[1] == 160 (even), fade(0.5) == 0.5
    expected = lerp(0.5, -0.5, -0.5) * 2
    assert gradient_noise(0.5) == pytest.approx(expected)


def test_gradient_noise_wraps_lattice():
    """Test that coordinates repeat every 256 lattice cells."""
    coords = np.linspace(0.0, 255.0, 1001)
    np.testing.assert_allclose(gradient_noise(coords), gradient_noise(coords + 256.0), atol=1e-9)
    assert gradient_noise(-0.5) == pytest.approx(gradient_noise(PERMUTATION_MASK + 0.5))


def test_generator_is_reproducible_with_seed():
    """Test that equal seeds produce identical streams."""
    first = PerlinNoiseGenerator(seed=42)
    second = PerlinNoiseGenerator(seed=42)
    assert [first() for _ in range(100)] == [second() for _ in range(100)]
    np.testing.assert_array_equal(
        PerlinNoiseGenerator(seed=7).samples(50), PerlinNoiseGenerator(seed=7).samples(50)
    )


def test_generator_seeds_differ():
    """Test that different seeds produce different streams."""
    a = PerlinNoiseGenerator(seed=1).samples(20)
    b = PerlinNoiseGenerator(seed=2).samples(20)
    assert not np.array_equal(a, b)


def test_generator_call_forms_agree():
    """Test that call, next(), and iteration draw from the same stream."""
    reference = PerlinNoiseGenerator(seed=3).samples(4)
    generator = PerlinNoiseGenerator(seed=3)
    drawn = [generator(), generator.next(), next(generator)]
    drawn.append(next(iter(generator)))
    np.testing.assert_allclose(drawn, reference)


def test_generator_default_seed_from_clock(mocker):
    """Test that a missing seed falls back to the wall clock."""
    mocker.patch("easydsp.noise.perlin.time.time_ns", return_value=123456789)
    generator = PerlinNoiseGenerator()
    assert generator.seed == 123456789
    np.testing.assert_array_equal(generator.samples(5), PerlinNoiseGenerator(123456789).samples(5))


def test_generator_output_is_bounded():
    """Test that continuous samples stay within [-2, 2] over a large run."""
    samples = PerlinNoiseGenerator(seed=2024).samples(100_000)
    assert samples.shape == (100_000,)
    assert np.all(np.abs(samples) <= 2.0)
    assert abs(float(samples.mean())) < 0.05
    assert samples.std() > 0.1


def test_generator_samples_validation():
    """Test sample count and mode validation."""
    generator = PerlinNoiseGenerator(seed=0)
    assert generator.samples(0).size == 0
    with pytest.raises(ValueError, match="non-negative"):
        generator.samples(-1)
    with pytest.raises(ValueError):
        PerlinNoiseGenerator(seed=0, mode="cubic")


def test_integer_mode_reproduces_historical_output():
    """Test the integer-draw variant, whose fractional part is always zero."""
    generator = PerlinNoiseGenerator(seed=11, mode=INTEGER)
    rng = np.random.default_rng(11)
    draws = [int(rng.integers(0, 511, endpoint=True)) for _ in range(200)]
    samples = generator.samples(200)

    for draw, sample in zip(draws, samples):
        sign = 1.0 if PERMUTATION[(draw & PERMUTATION_MASK) + 1] % 2 else -1.0
        assert sample == pytest.approx(sign * fade(float(draw)) * 2)
    assert np.abs(samples).max() > 2.0


def test_modes_are_exposed():
    """Test the mode attribute and its default."""
    assert PerlinNoiseGenerator(seed=0).mode == CONTINUOUS
    assert PerlinNoiseGenerator(seed=0, mode=INTEGER).mode == INTEGER
