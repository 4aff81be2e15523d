"""
Shared fixtures for ZeroShell tests.
"""

import pytest

import config
from ZeroShell.shell import Session


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    """Plain output so tests can compare text."""
    monkeypatch.setattr(config, "USE_COLOR", False)


@pytest.fixture
def session(tmp_path, monkeypatch):
    """A session rooted in a temporary directory."""
    home = tmp_path / "home"
    work = home / "work"
    work.mkdir(parents=True)
    monkeypatch.chdir(work)
    return Session(
        current_directory=str(work),
        previous_directory=str(work),
        home_directory=str(home),
    )


class ScriptedInput:
    """Stands in for input(): returns queued lines, then raises EOFError."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def scripted():
    return ScriptedInput
