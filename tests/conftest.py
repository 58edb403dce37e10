"""
Shared pytest configuration and fixtures.

This module provides fixtures and configuration used across all test suites
(unit and integration tests).
"""

import random
from pathlib import Path

import pytest


# 9 July 1981, gender code 5005, citizen
SCENARIO_ID = "8107095005083"


@pytest.fixture
def project_root() -> Path:
    """
    Return the project root directory.

    Returns:
        Path: Absolute path to the project root directory.
    """
    return Path(__file__).parent.parent


@pytest.fixture
def src_dir(project_root: Path) -> Path:
    """
    Return the src directory path.

    Args:
        project_root: Project root directory fixture.

    Returns:
        Path: Absolute path to the src directory.
    """
    return project_root / "src"


@pytest.fixture
def seeded_rng() -> random.Random:
    """
    Return a deterministic random source.

    Returns:
        random.Random: Random instance seeded with 42.
    """
    return random.Random(42)


@pytest.fixture
def scenario_id() -> str:
    """
    Return the reference ID number used across tests.

    Returns:
        str: ID number for a male citizen born 9 July 1981.
    """
    return SCENARIO_ID


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    """
    Return a log file path inside the temporary directory.

    Args:
        tmp_path: Pytest's temporary directory fixture.

    Returns:
        Path: Log file path that CLI tests pass via --log-file.
    """
    return tmp_path / "logs" / "test.log"
