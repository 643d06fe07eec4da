"""Shared fixtures: isolated roots and clean global state."""

import pytest

from cnsl import Cnsl
from cnsl.foundation.config import clear_settings_cache
from cnsl.foundation.testing import RecordingConsole
from cnsl.observability import reset_logging
from cnsl.runtime import reset_cnsl


@pytest.fixture(autouse=True)
def clean_globals() -> object:
    """Reset the process root, diagnostics and settings around each test."""
    reset_cnsl()
    reset_logging()
    clear_settings_cache()
    yield
    reset_cnsl()
    reset_logging()
    clear_settings_cache()


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def root(console: RecordingConsole) -> Cnsl:
    return Cnsl(console=console)
