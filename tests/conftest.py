"""Shared test fixtures for ashttp.

Provides isolated config environments, alias-file helpers, output state
management, and a CLI runner. These fixtures are discovered by pytest and
available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from ashttp.output import OutputFormat, OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests(monkeypatch: pytest.MonkeyPatch) -> None:
    """Reset the global OutputManager after every test and disable colour.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When the CliRunner redirects those streams and the test
    finishes, the cached references become stale. Colour is disabled so that
    Rich never re-wraps long lines in captured output.
    """
    monkeypatch.setenv("NO_COLOR", "1")
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Points XDG_CONFIG_HOME and XDG_DATA_HOME at subdirectories of tmp_path,
    forces XDG path resolution, clears ASHTTP_CONFIG, and changes the working
    directory to tmp_path.

    Returns:
        The tmp_path root directory.
    """
    monkeypatch.setattr("ashttp.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    monkeypatch.delenv("ASHTTP_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def default_config_file(isolated_config: Path) -> Path:
    """Location of the alias file inside the isolated config directory."""
    return isolated_config / "config" / "ashttp" / "config.json"


def write_aliases(path: Path, data: Any) -> Path:
    """Write *data* as JSON to *path*, creating parent dirs."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def custom_config(tmp_path: Path) -> Path:
    """An alias file with two entries, outside the default location."""
    return write_aliases(
        tmp_path / "aliases.json",
        {
            "api": {
                "url": "https://api.example.com",
                "defaultHeaders": {
                    "Authorization": "Bearer token123",
                    "X-Api-Version": "2",
                },
            },
            "staging": {
                "url": "https://staging.example.com/",
                "defaultHeaders": {"X-Environment": "staging"},
            },
        },
    )


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
