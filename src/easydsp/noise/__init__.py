"""Noise generators."""

from .perlin import (
    CONTINUOUS,
    INTEGER,
    MODES,
    PERMUTATION,
    PerlinNoiseGenerator,
    fade,
    grad,
    gradient_noise,
    lerp,
)

__all__ = [
    "CONTINUOUS",
    "INTEGER",
    "MODES",
    "PERMUTATION",
    "PerlinNoiseGenerator",
    "fade",
    "grad",
    "gradient_noise",
    "lerp",
]
