"""Shared pytest fixtures."""

import io
import os
import tempfile
from pathlib import Path

import pytest

from simplecli.core.terminal import Terminal
from simplecli.utils.debug import reload_config


class ScriptedIO:
    """Terminal fed from a fixed list of input lines, capturing output."""

    def __init__(self, *lines: str):
        self.stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        self.stdout = io.StringIO()
        self.terminal = Terminal(stdin=self.stdin, stdout=self.stdout, color=False)

    @property
    def output(self) -> str:
        return self.stdout.getvalue()

    @property
    def lines(self) -> list[str]:
        return self.output.splitlines()

    def count(self, text: str) -> int:
        """Number of output lines containing ``text``."""
        return sum(1 for line in self.lines if text in line)

    def remaining_input(self) -> str:
        return self.stdin.read()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture(autouse=True)
def mock_simplecli_dir(temp_dir, monkeypatch):
    """Point SIMPLECLI_DIR at a fresh directory and drop other overrides."""
    for key in list(os.environ):
        if key.startswith("SIMPLECLI_"):
            monkeypatch.delenv(key)
    config_dir = temp_dir / ".simplecli"
    config_dir.mkdir()
    monkeypatch.setenv("SIMPLECLI_DIR", str(config_dir))
    reload_config()
    yield config_dir
    reload_config()


@pytest.fixture
def scripted():
    """Factory for ScriptedIO: ``scripted("1", "2")``."""
    return ScriptedIO
