"""
Shared test fixtures for shellsplit tests.
"""

import json
from pathlib import Path

import pytest
import structlog

from shellsplit.core import config as config_module
from shellsplit.core.config import Config, configure_logging


@pytest.fixture(autouse=True)
def reset_logging():
    """Leave logging unconfigured between tests."""
    yield
    configure_logging(Config())
    structlog.reset_defaults()


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """Run from an empty directory with no user or env config."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setattr(config_module, "USER_CONFIG", home / ".shellsplit" / "config")
    monkeypatch.delenv(config_module.ENV_CONFIG, raising=False)
    monkeypatch.chdir(work)
    return work


@pytest.fixture
def run_cli(capsys):
    """Return a main() wrapper that returns (exit status, parsed JSON output)."""
    from shellsplit.shellsplit import main

    def _run(*argv: str):
        status = main(list(argv))
        out = capsys.readouterr().out
        return status, json.loads(out) if out.strip() else None

    return _run


def read_log(path: Path) -> list[dict]:
    """Parse a JSON-lines log file."""
    return [json.loads(line) for line in path.read_text().splitlines() if line.strip()]


class NastyReader:
    """Source whose read() always fails."""

    def __init__(self, error: Exception):
        self.error = error

    def read(self, size: int = -1) -> str:
        raise self.error
