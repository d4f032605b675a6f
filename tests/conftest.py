"""Global test configuration and fixtures."""

import pytest
import structlog
from click.testing import CliRunner


@pytest.fixture
def runner():
    """Return a click test runner."""
    return CliRunner()


@pytest.fixture
def values_file(tmp_path):
    """Write the textbook sample to a comma and newline separated file."""
    path = tmp_path / "values.txt"
    path.write_text("2, 4, 4\n4 5\n5,7,9\n")
    return path


@pytest.fixture(autouse=True)
def reset_structlog():
    # The CLI reconfigures structlog on every invocation.
    yield
    structlog.reset_defaults()
