"""Hosts — where a run's diagnostics, failure signal and outputs go."""

from __future__ import annotations

import os
import sys
import uuid
from typing import IO, Protocol, runtime_checkable

import structlog

log = structlog.get_logger("component_locator.host")


@runtime_checkable
class Host(Protocol):
    """Interface the locator runner reports through."""

    def info(self, message: str) -> None: ...

    def warning(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def set_failed(self, message: str) -> None: ...

    def set_output(self, name: str, value: str) -> None: ...


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


class GitHubActionsHost:
    """Emit workflow commands on stdout and write outputs to ``$GITHUB_OUTPUT``."""

    def __init__(self, stream: IO[str] | None = None, output_file: str | None = None) -> None:
        self._stream = stream or sys.stdout
        self._output_file = output_file if output_file is not None else os.environ.get(
            "GITHUB_OUTPUT"
        )
        self.failed_message: str | None = None

    @property
    def exit_code(self) -> int:
        return 1 if self.failed_message is not None else 0

    def _command(self, command: str, message: str) -> None:
        self._stream.write(f"::{command}::{_escape_data(message)}\n")
        self._stream.flush()

    def info(self, message: str) -> None:
        self._stream.write(message + "\n")
        self._stream.flush()

    def warning(self, message: str) -> None:
        self._command("warning", message)

    def error(self, message: str) -> None:
        self._command("error", message)

    def set_failed(self, message: str) -> None:
        self.failed_message = message
        self.error(message)

    def set_output(self, name: str, value: str) -> None:
        if not self._output_file:
            log.debug("host.output_dropped", name=name, reason="GITHUB_OUTPUT not set")
            return
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        with open(self._output_file, "a", encoding="utf-8") as fh:
            fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")


class ConsoleHost:
    """Report through structlog; keep outputs in memory for the CLI to print."""

    def __init__(self) -> None:
        self._log = structlog.get_logger("component_locator")
        self.failed_message: str | None = None
        self.outputs: dict[str, str] = {}

    @property
    def exit_code(self) -> int:
        return 1 if self.failed_message is not None else 0

    def info(self, message: str) -> None:
        self._log.info(message)

    def warning(self, message: str) -> None:
        self._log.warning(message)

    def error(self, message: str) -> None:
        self._log.error(message)

    def set_failed(self, message: str) -> None:
        self.failed_message = message
        self._log.error(message, failed=True)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
