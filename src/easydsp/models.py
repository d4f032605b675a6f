"""Serializable records for moment and noise results."""

from typing import Any

import marshmallow as ma
from marshmallow import validate
from attrs import asdict as attrs_asdict, define, field

from .noise import MODES


def _float_tuple(values: Any) -> tuple[float, ...]:
    """Normalize a sequence of samples into a tuple of floats."""
    return tuple(float(value) for value in values)


@define(slots=True, frozen=True)
class MomentReport:
    """Central moment of a sample together with the inputs that define it."""

    order: int = field(converter=int)
    mean: float = field(converter=float)
    value: float = field(converter=float)
    count: int = field(converter=int)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation of the report."""
        return attrs_asdict(self)


class MomentReportSchema(ma.Schema):
    """Marshmallow schema for :class:`MomentReport`."""

    order = ma.fields.Int(required=True, validate=validate.Range(min=1))
    mean = ma.fields.Float(required=True)
    value = ma.fields.Float(required=True)
    count = ma.fields.Int(required=True, validate=validate.Range(min=1))

    @ma.post_load
    def make_report(self, data: dict[str, Any], **kwargs: object) -> MomentReport:
        """Instantiate :class:`MomentReport` from validated payloads."""
        return MomentReport(**data)


@define(slots=True, frozen=True)
class NoiseSeries:
    """A run of noise samples and the seed that reproduces it."""

    seed: int = field(converter=int)
    mode: str
    samples: tuple[float, ...] = field(converter=_float_tuple, factory=tuple)

    @property
    def count(self) -> int:
        """Number of samples in the series."""
        return len(self.samples)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly representation of the series."""
        return {
            "seed": self.seed,
            "mode": self.mode,
            "count": self.count,
            "samples": list(self.samples),
        }


class NoiseSeriesSchema(ma.Schema):
    """Marshmallow schema for :class:`NoiseSeries`."""

    class Meta:
        unknown = ma.EXCLUDE

    seed = ma.fields.Int(required=True)
    mode = ma.fields.Str(required=True, validate=validate.OneOf(MODES))
    count = ma.fields.Int(dump_only=True)
    samples = ma.fields.List(ma.fields.Float(), required=True)

    @ma.post_load
    def make_series(self, data: dict[str, Any], **kwargs: object) -> NoiseSeries:
        """Instantiate :class:`NoiseSeries` from validated payloads."""
        return NoiseSeries(seed=data["seed"], mode=data["mode"], samples=data["samples"])


__all__ = ["MomentReport", "MomentReportSchema", "NoiseSeries", "NoiseSeriesSchema"]
