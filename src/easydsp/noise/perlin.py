"""One-dimensional gradient (Perlin) noise."""

import math
import time
from collections.abc import Iterator

import numpy as np
import numpy.typing as npt
import structlog
from attrs import define, field
from attrs.validators import in_

logger = structlog.get_logger(__name__)

# Ken Perlin's reference permutation of 0..255.
_BASE_PERMUTATION: tuple[int, ...] = (
    151, 160, 137, 91, 90, 15, 131, 13, 201, 95, 96, 53, 194, 233, 7, 225, 140, 36,
    103, 30, 69, 142, 8, 99, 37, 240, 21, 10, 23, 190, 6, 148, 247, 120, 234, 75, 0,
    26, 197, 62, 94, 252, 219, 203, 117, 35, 11, 32, 57, 177, 33, 88, 237, 149, 56, 87,
    174, 20, 125, 136, 171, 168, 68, 175, 74, 165, 71, 134, 139, 48, 27, 166, 77, 146,
    158, 231, 83, 111, 229, 122, 60, 211, 133, 230, 220, 105, 92, 41, 55, 46, 245, 40,
    244, 102, 143, 54, 65, 25, 63, 161, 1, 216, 80, 73, 209, 76, 132, 187, 208, 89, 18,
    169, 200, 196, 135, 130, 116, 188, 159, 86, 164, 100, 109, 198, 173, 186, 3, 64,
    52, 217, 226, 250, 124, 123, 5, 202, 38, 147, 118, 126, 255, 82, 85, 212, 207, 206,
    59, 227, 47, 16, 58, 17, 182, 189, 28, 42, 223, 183, 170, 213, 119, 248, 152, 2,
    44, 154, 163, 70, 221, 153, 101, 155, 167, 43, 172, 9, 129, 22, 39, 253, 19, 98,
    108, 110, 79, 113, 224, 232, 178, 185, 112, 104, 218, 246, 97, 228, 251, 34, 242,
    193, 238, 210, 144, 12, 191, 179, 162, 241, 81, 51, 145, 235, 249, 14, 239, 107,
    49, 192, 214, 31, 181, 199, 106, 157, 184, 84, 204, 176, 115, 121, 50, 45, 127, 4,
    150, 254, 138, 236, 205, 93, 222, 114, 67, 29, 24, 72, 243, 141, 128, 195, 78, 66,
    215, 61, 156, 180,
)

PERMUTATION: tuple[int, ...] = _BASE_PERMUTATION + _BASE_PERMUTATION
PERMUTATION_MASK = 0xFF
DISTRIBUTION_HIGH = 511
COORDINATE_SPAN = float(DISTRIBUTION_HIGH + 1)

_TABLE = np.array(PERMUTATION, dtype=np.int64)
_TABLE.setflags(write=False)

CONTINUOUS = "continuous"
INTEGER = "integer"
MODES = (CONTINUOUS, INTEGER)


def fade(t):
    """Quintic smoothstep ``6t^5 - 15t^4 + 10t^3``."""
    return t * t * t * (t * (t * 6 - 15) + 10)


def lerp(t, a, b):
    """Linear interpolation between ``a`` and ``b`` by weight ``t``."""
    return a + t * (b - a)


def grad(hash_value, x):
    """Return ``x`` for even hashes and ``-x`` for odd ones."""
    if np.ndim(hash_value) == 0:
        return x if (int(hash_value) & 1) == 0 else -x
    return np.where((np.asarray(hash_value) & 1) == 0, x, -x)


def gradient_noise(x: npt.ArrayLike):
    """Evaluate noise at continuous coordinate(s) ``x``.

    The integer part of ``x`` selects a lattice cell in the permutation table and
    the fractional part is eased through :func:`fade`. Results lie in ``[-2, 2]``
    and are zero on every lattice point.
    """
    coord = np.asarray(x, dtype=np.float64)
    lattice = np.floor(coord)
    index = lattice.astype(np.int64) & PERMUTATION_MASK
    frac = coord - lattice
    value = lerp(fade(frac), grad(_TABLE[index], frac), grad(_TABLE[index + 1], frac - 1)) * 2
    if np.ndim(value) == 0:
        return float(value)
    return value


def _integer_noise(draw: int) -> float:
    """Literal integer-draw variant; ``frac`` is always 0 so the output is unbounded."""
    index = draw & PERMUTATION_MASK
    frac = draw - math.floor(draw)
    weight = fade(float(draw))
    return lerp(weight, grad(PERMUTATION[index], frac), grad(PERMUTATION[index + 1], frac - 1)) * 2


@define(slots=True)
class PerlinNoiseGenerator:
    """Stateful stream of gradient noise samples.

    Each instance owns its random engine. ``seed`` defaults to the wall clock in
    nanoseconds and is kept on the instance so a stream can be replayed by
    constructing a new generator with the same seed.

    ``mode="continuous"`` draws a coordinate uniformly from ``[0, 512)`` and
    evaluates :func:`gradient_noise` there. ``mode="integer"`` draws an integer
    from ``[0, 511]`` and interpolates on it directly, matching the historical
    EasyDSP output; that variant is not bounded.

    Instances are not safe to share between threads.
    """

    seed: int | None = None
    mode: str = field(default=CONTINUOUS, kw_only=True, validator=in_(MODES))
    _rng: np.random.Generator = field(init=False, repr=False)

    def __attrs_post_init__(self) -> None:
        """Seed the random engine."""
        if self.seed is None:
            self.seed = time.time_ns()
        self._rng = np.random.default_rng(self.seed)
        logger.debug("noise.generator_created", seed=self.seed, mode=self.mode)

    def __call__(self) -> float:
        """Draw the next noise sample."""
        if self.mode == INTEGER:
            return _integer_noise(int(self._rng.integers(0, DISTRIBUTION_HIGH, endpoint=True)))
        return gradient_noise(self._rng.uniform(0.0, COORDINATE_SPAN))

    def next(self) -> float:
        """Draw the next noise sample."""
        return self()

    def __iter__(self) -> Iterator[float]:
        return self

    def __next__(self) -> float:
        return self()

    def samples(self, count: int) -> npt.NDArray[np.float64]:
        """Return the next ``count`` samples of the stream as an array."""
        if count < 0:
            raise ValueError("count must be non-negative.")
        if self.mode == INTEGER:
            return np.fromiter((self() for _ in range(count)), dtype=np.float64, count=count)
        coords = self._rng.uniform(0.0, COORDINATE_SPAN, size=count)
        return np.asarray(gradient_noise(coords), dtype=np.float64)


__all__ = [
    "CONTINUOUS",
    "DISTRIBUTION_HIGH",
    "INTEGER",
    "MODES",
    "PERMUTATION",
    "PERMUTATION_MASK",
    "PerlinNoiseGenerator",
    "fade",
    "grad",
    "gradient_noise",
    "lerp",
]
