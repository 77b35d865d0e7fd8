"""
Pytest configuration and shared fixtures.

This module provides central pytest configuration, custom markers,
and shared fixtures for the event manager test suite.
"""

import logging
import os
import shutil
import tempfile
from collections.abc import Generator
from io import StringIO
from pathlib import Path

import pytest

from eventmanager.event import EventList
from eventmanager.log import LogConfig, Logger, LoggerFactory
from eventmanager.parser import Parser
from eventmanager.ui import Console

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, isolated, no external dependencies)"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests (filesystem, several components)"
    )
    config.addinivalue_line("markers", "property: Property-based tests (hypothesis)")
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests (full session through the CLI entry point)"
    )


# =============================================================================
# Shared Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Remove path-style loggers registered by a test.

    LoggerFactory returns an existing logger of the same name, so loggers
    created by one test would otherwise leak their config into the next.
    """
    yield
    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/"):
            del logging.root.manager.loggerDict[name]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop EVENTMGR_* and color variables so the host environment cannot leak in."""
    for key in list(os.environ):
        if key.startswith("EVENTMGR_") or key in ("NO_COLOR", "FORCE_COLOR"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Provide a temporary directory that is cleaned up after the test.

    Yields:
        Path: Temporary directory path
    """
    temp_path = Path(tempfile.mkdtemp(prefix="eventmanager-test-"))
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def log_stream() -> StringIO:
    """Stream receiving output of the ``lg`` fixture."""
    return StringIO()


@pytest.fixture
def lg(log_stream: StringIO) -> Logger:
    """Debug-level root logger writing plain text to ``log_stream``."""
    config = LogConfig.from_params("debug", colors=False)
    return LoggerFactory.create_root(config, stream=log_stream)


@pytest.fixture
def events() -> EventList:
    """Empty event list."""
    return EventList()


@pytest.fixture
def parser() -> Parser:
    """Parser with logging disabled."""
    return Parser()


@pytest.fixture
def console_output() -> StringIO:
    """Stream receiving output of the ``console`` fixture."""
    return StringIO()


@pytest.fixture
def console(console_output: StringIO) -> Console:
    """Colorless console writing to ``console_output``."""
    return Console(force_terminal=False, no_color=True, file=console_output)
