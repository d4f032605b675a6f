"""Command line entry point for the easydsp toolbox."""

from __future__ import annotations

import json
import re
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

import click
import structlog

from easydsp.logging import configure_logging
from easydsp.models import MomentReport, MomentReportSchema, NoiseSeries, NoiseSeriesSchema
from easydsp.noise import CONTINUOUS, MODES, PerlinNoiseGenerator
from easydsp.output import generate_noise_plot
from easydsp.statistics import (
    EmptyInputError,
    InvalidOrderError,
    mean as sample_mean,
    moment as central_moment,
    summarize as summarize_sample,
)

INPUT_HELP = "Read whitespace or comma separated numbers from a file ('-' for stdin)."

LOG_FORMAT_CHOICES = ("console", "json")
LOG_LEVEL_CHOICES = ("critical", "error", "warning", "info", "debug")

_NUMBER_SEPARATOR = re.compile(r"[\s,]+")
# Let negative numbers through as positional VALUES.
_NUMERIC_ARGS = {"ignore_unknown_options": True}

logger = structlog.get_logger(__name__)


def _parse_numbers(text: str, *, source: str) -> list[float]:
    """Split free-form text into floats, reporting the offending token on failure."""
    numbers = []
    for token in _NUMBER_SEPARATOR.split(text.strip()):
        if not token:
            continue
        try:
            numbers.append(float(token))
        except ValueError as exc:
            raise click.BadParameter(f"{token!r} is not a number.", param_hint=source) from exc
    return numbers


def _collect_values(values: Sequence[str], input_file: TextIO | None) -> list[float]:
    """Merge positional values with numbers read from ``--input``."""
    collected = _parse_numbers(" ".join(values), source="VALUES")
    if input_file is not None:
        collected.extend(_parse_numbers(input_file.read(), source="--input"))
    if not collected:
        raise click.UsageError("No values supplied; pass VALUES or --input.")
    return collected


def _emit_json(payload: dict[str, object], output: Path | None) -> None:
    """Write a JSON payload to ``output`` or stdout."""
    text = json.dumps(payload, indent=2)
    if output is None:
        click.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text)
    click.echo(f"Wrote {output}", err=True)
    logger.debug("output.written", output=str(output))


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVEL_CHOICES, case_sensitive=False),
    envvar="EASYDSP_LOG_LEVEL",
    default="warning",
    show_default=True,
    help="Verbosity for structured logs.",
)
@click.option(
    "--log-format",
    type=click.Choice(LOG_FORMAT_CHOICES, case_sensitive=False),
    envvar="EASYDSP_LOG_FORMAT",
    default="console",
    show_default=True,
    help="Render logs as console-friendly text or JSON.",
)
def cli(log_level: str, log_format: str) -> None:
    """Compute sample moments and generate gradient noise."""
    configure_logging(level=log_level, json_output=log_format.lower() == "json")
    logger.bind(command_group="easydsp").debug(
        "cli.initialized",
        log_level=log_level.lower(),
        log_format=log_format.lower(),
    )


@cli.command("moment", context_settings=_NUMERIC_ARGS)
@click.argument("values", nargs=-1)
@click.option("--order", "-n", type=int, required=True, help="Order of the central moment.")
@click.option(
    "--mean",
    "mean_value",
    type=float,
    default=None,
    help="Precomputed mean of the same values; computed when omitted.",
)
@click.option("--input", "input_file", type=click.File("r"), default=None, help=INPUT_HELP)
def moment(
    *,
    values: tuple[str, ...],
    order: int,
    mean_value: float | None,
    input_file: TextIO | None,
) -> None:
    """Print the N-th central moment of VALUES as JSON."""
    samples = _collect_values(values, input_file)
    cmd_log = logger.bind(command="moment", order=order)
    cmd_log.info("command.start", count=len(samples), mean_supplied=mean_value is not None)
    try:
        center = sample_mean(samples) if mean_value is None else mean_value
        result = central_moment(samples, order, center)
    except InvalidOrderError as exc:
        raise click.BadParameter(str(exc), param_hint="--order") from exc
    except EmptyInputError as exc:
        raise click.UsageError(str(exc)) from exc
    report = MomentReport(order=order, mean=center, value=result, count=len(samples))
    click.echo(json.dumps(MomentReportSchema().dump(report), indent=2))
    cmd_log.info("command.completed", value=report.value)


@cli.command("summarize", context_settings=_NUMERIC_ARGS)
@click.argument("values", nargs=-1)
@click.option(
    "--max-order",
    type=int,
    default=4,
    show_default=True,
    help="Highest central moment to include.",
)
@click.option("--input", "input_file", type=click.File("r"), default=None, help=INPUT_HELP)
def summarize(
    *,
    values: tuple[str, ...],
    max_order: int,
    input_file: TextIO | None,
) -> None:
    """Print mean, variance, skewness, kurtosis and central moments of VALUES."""
    samples = _collect_values(values, input_file)
    cmd_log = logger.bind(command="summarize", max_order=max_order)
    cmd_log.info("command.start", count=len(samples))
    try:
        summary = summarize_sample(samples, max_order=max_order)
    except InvalidOrderError as exc:
        raise click.BadParameter(str(exc), param_hint="--max-order") from exc
    click.echo(json.dumps(summary.to_dict(), indent=2))
    cmd_log.info("command.completed")


@cli.command("noise")
@click.option("--count", "-c", type=click.IntRange(min=1), default=16, show_default=True)
@click.option(
    "--seed",
    type=click.IntRange(min=0),
    envvar="EASYDSP_NOISE_SEED",
    default=None,
    help="Seed for a reproducible stream. Defaults to the current time.",
)
@click.option(
    "--mode",
    type=click.Choice(MODES, case_sensitive=False),
    default=CONTINUOUS,
    show_default=True,
    help="'integer' reproduces the historical unbounded output.",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional path to write the JSON series.",
)
@click.option(
    "--plot-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Render a trace and histogram of the samples into this directory.",
)
def noise(
    *,
    count: int,
    seed: int | None,
    mode: str,
    output: Path | None,
    plot_dir: Path | None,
) -> None:
    """Generate COUNT gradient noise samples."""
    generator = PerlinNoiseGenerator(seed, mode=mode.lower())
    cmd_log = logger.bind(command="noise", seed=generator.seed, mode=generator.mode)
    cmd_log.info("command.start", count=count)
    series = NoiseSeries(seed=generator.seed, mode=generator.mode, samples=generator.samples(count))
    _emit_json(NoiseSeriesSchema().dump(series), output)
    if plot_dir is not None:
        report = generate_noise_plot(
            series.samples,
            output_dir=plot_dir,
            filename=f"noise_{generator.mode}_{generator.seed}.png",
        )
        click.echo(f"Wrote plot to {report.path}", err=True)
        cmd_log.info("plot.written", path=str(report.path), std=report.statistics.standard_deviation)
    cmd_log.info("command.completed", samples=series.count)


if __name__ == "__main__":
    cli()
