"""Shared helpers for plotting and report formatting."""

from pathlib import Path


def ensure_directory(path: str | Path) -> Path:
    """Create the directory at ``path`` if needed and return its Path."""
    directory = Path(path)
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
    return directory


def format_float(value: float, digits: int = 4) -> str:
    """Format a statistic with a fixed number of decimals."""
    return f"{value:.{digits}f}"
