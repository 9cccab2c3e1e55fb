"""Shared pytest fixtures for component-locator tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import structlog


class RecordingHost:
    """Host that keeps every message so tests can assert on them."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.failed_message: str | None = None
        self.outputs: dict[str, str] = {}

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warning(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def set_failed(self, message: str) -> None:
        self.failed_message = message

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value


@pytest.fixture
def host() -> RecordingHost:
    return RecordingHost()


@pytest.fixture
def write_manifest():
    """Write ``component: <name>`` into *path*, creating parent directories."""

    def _write(path: Path, name: str | None = None, content: str | None = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if content is None:
            content = f"component: {name}\n"
        path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def _reset_logging():
    """Drop handlers the CLI installs so later tests don't write to a closed stream."""
    yield
    structlog.reset_defaults()
    logger = logging.getLogger("component_locator")
    logger.handlers.clear()
    logger.propagate = True
