"""Shared test fixtures for cppsetup tests."""
import io
from datetime import datetime

import pytest
from rich.console import Console

from cppsetup.core.config import SetupSettings, set_settings
from cppsetup.scaffold.formatting import FormattingContext


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Keep environment-driven settings from leaking between tests."""
    for var in ("CPPSETUP_MOCK", "CPPSETUP_TOOLS", "CPPSETUP_AUTHOR", "CPPSETUP_PACKAGE_MANAGER"):
        monkeypatch.delenv(var, raising=False)
    set_settings(None)
    yield
    set_settings(None)


@pytest.fixture
def console():
    """Console that records output instead of printing it."""
    return Console(file=io.StringIO(), width=200)


@pytest.fixture
def fixed_ctx():
    """Formatting context pinned to 2 November 2022."""
    return FormattingContext(timestamp=datetime(2022, 11, 2, 9, 30))


@pytest.fixture
def mock_settings():
    """Settings that never touch the real package manager."""
    return SetupSettings(mock=True)


class ScriptedReader:
    """Prompt reader fed from a fixed list of lines (None means end-of-input)."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.calls = []

    def __call__(self, field):
        self.calls.append(field.key)
        if not self.lines:
            raise AssertionError(f"Unexpected prompt for {field.key}")
        return self.lines.pop(0)


@pytest.fixture
def scripted_reader():
    """Factory for ScriptedReader instances."""
    return ScriptedReader
