"""Integration test fixtures and configuration.

This module provides fixtures for integration tests, including:
- Configuration fixtures that keep files inside tmp_path
- Logging isolation for CliRunner invocations
"""

from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def no_logging_setup(request):
    """Keep CLI runs from installing handlers bound to CliRunner streams.

    Tests marked with ``real_logging`` configure handlers for real.
    """
    if request.node.get_closest_marker("real_logging"):
        yield
        return
    with patch("sa_idnumber.cli.main.configure_logging"):
        yield


@pytest.fixture
def cli_args(tmp_path: Path, log_file: Path) -> list[str]:
    """
    Return global CLI options pointing at an empty config file.

    Args:
        tmp_path: Pytest's temporary directory fixture.
        log_file: Log file path fixture.

    Returns:
        list[str]: Options to prefix to every CLI invocation.
    """
    config_file = tmp_path / "config.json"
    config_file.write_text("{}")
    return ["--config", str(config_file), "--log-file", str(log_file)]
