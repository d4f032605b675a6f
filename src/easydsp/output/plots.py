"""Plotting tools for noise streams and numeric samples."""

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from ..statistics import MomentSummary, summarize
from ..statistics.utils import to_numpy
from .utils import ensure_directory, format_float


@dataclass(frozen=True)
class NoisePlotConfig:
    """Styling options for the trace and histogram panels."""

    title: str = "Gradient Noise"
    trace_xlabel: str = "Sample"
    trace_ylabel: str = "Value"
    hist_xlabel: str = "Value"
    hist_ylabel: str = "Frequency"
    bins: int = 50
    color: str = "#126782"
    marker_color: str = "#d08300"
    alpha: float = 0.6
    line_width: float = 1.0


@dataclass(frozen=True)
class PlotReport:
    """Metadata describing a saved plot and its computed statistics."""

    path: Path
    statistics: MomentSummary


def generate_noise_plot(
    samples: Iterable[float],
    *,
    output_dir: str | Path = "out",
    filename: str = "noise.png",
    config: NoisePlotConfig | None = None,
) -> PlotReport:
    """Render a sample trace alongside its histogram with mean and ±1 std markers."""
    config = config or NoisePlotConfig()
    out_dir = ensure_directory(output_dir)

    vals = to_numpy(samples)
    stats = summarize(vals)

    fig, (trace_ax, hist_ax) = plt.subplots(1, 2, figsize=(13, 5))
    fig.suptitle(config.title)

    trace_ax.plot(
        np.arange(vals.size),
        vals,
        color=config.color,
        linewidth=config.line_width,
    )
    trace_ax.set_xlabel(config.trace_xlabel)
    trace_ax.set_ylabel(config.trace_ylabel)
    trace_ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.6)

    hist_ax.hist(
        vals,
        bins=config.bins,
        color=config.color,
        alpha=config.alpha,
        edgecolor="white",
    )
    hist_ax.axvline(
        stats.mean,
        color=config.marker_color,
        linestyle="--",
        linewidth=1.5,
        label=f"Mean ≈ {format_float(stats.mean)}",
    )
    for offset in (-stats.standard_deviation, stats.standard_deviation):
        hist_ax.axvline(
            stats.mean + offset,
            color=config.marker_color,
            linestyle=":",
            linewidth=1.5,
        )
    hist_ax.set_xlabel(config.hist_xlabel)
    hist_ax.set_ylabel(config.hist_ylabel)
    hist_ax.legend(loc="upper right")
    hist_ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.6)
    fig.tight_layout()

    output_path = out_dir / filename
    fig.savefig(output_path, dpi=150)
    plt.close(fig)
    return PlotReport(path=output_path, statistics=stats)
