"""Shared pytest fixtures for badchecks tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from badchecks.config.settings import BadChecksSettings


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Empty CWD with no BADCHECKS_* environment, so no config leaks in.

    Drop a ``badchecks.toml`` here to exercise config discovery.
    """
    for name in ("BADCHECKS_CONFIG", "BADCHECKS_QUIET", "BADCHECKS_VERBOSE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(workdir: Path) -> BadChecksSettings:
    """Default settings, discovered from the isolated work directory."""
    return BadChecksSettings.from_cli(cwd=workdir)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the logging setup the CLI's AppContext installs globally."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    package_logger = logging.getLogger("badchecks")
    package_level = package_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    package_logger.setLevel(package_level)
