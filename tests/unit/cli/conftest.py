"""Fixtures for CLI tests."""

from pathlib import Path

import pytest

import apimeta.cli


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch, tmp_path: Path) -> Path:
    """Run commands from an empty directory with no APIMETA_* overrides.

    Logging is marked as configured so the CLI leaves pytest's handlers alone.
    """
    for name in (
        "APIMETA_CONFIG_PATH",
        "APIMETA_PATHS",
        "APIMETA_LOG_LEVEL",
        "APIMETA_LOG_FORMAT",
        "APIMETA_LOG_FILE",
        "APIMETA_LOG_STDERR",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(apimeta.cli, "_logging_configured", True)
    monkeypatch.chdir(tmp_path)
    return tmp_path
