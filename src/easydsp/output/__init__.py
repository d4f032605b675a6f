"""Visualization utilities for noise and sample statistics."""

from .plots import NoisePlotConfig, PlotReport, generate_noise_plot

__all__ = ["NoisePlotConfig", "PlotReport", "generate_noise_plot"]
