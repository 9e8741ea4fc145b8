"""
Shared test fixtures and configuration.
"""

import io
from pathlib import Path

import pytest
from rich.console import Console

from installer_cli.models.config import InstallerConfig


@pytest.fixture
def config(tmp_path: Path) -> InstallerConfig:
    """Return a configuration rooted in a temporary working directory."""
    return InstallerConfig(work_dir=tmp_path)


@pytest.fixture
def quiet_console() -> Console:
    """Return a console that records output instead of printing it."""
    return Console(record=True, width=120, file=io.StringIO())
