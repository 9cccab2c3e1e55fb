"""LocatorRunner — normalize requests, scan search roots, report through a host."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Literal

import structlog

from component_locator.config import LocatorSettings
from component_locator.engines.manifest_scanner import ManifestScanner, ScanResult
from component_locator.errors import ConfigurationError, LocatorError, ScanError, SpecifierError
from component_locator.hosts import Host
from component_locator.specifiers import NormalizeResult, name_of, normalize_components

log = structlog.get_logger("component_locator.runner")

RunStatus = Literal["success", "validation_error", "not_found", "io_error"]

COMPONENT_MAP_OUTPUT = "component-map"


@dataclass
class RunOutcome:
    """Result of one locator run."""

    status: RunStatus
    normalized: NormalizeResult | None = None
    scan: ScanResult | None = None
    unresolved: list[str] = field(default_factory=list)
    message: str | None = None

    @property
    def failed(self) -> bool:
        return self.status in ("validation_error", "io_error")

    @property
    def matches(self) -> dict[str, str]:
        return dict(self.scan.matches) if self.scan is not None else {}


def _status_for(exc: LocatorError) -> RunStatus:
    if isinstance(exc, ScanError):
        return "io_error"
    return "validation_error"


class LocatorRunner:
    """Orchestration layer: settings → normalizer → scanner → host."""

    def __init__(self, host: Host) -> None:
        self._host = host

    def run(self, settings: LocatorSettings) -> RunOutcome:
        """Execute one run; fatal conditions are reported via ``host.set_failed``."""
        outcome = RunOutcome(status="success")
        try:
            self._run(settings, outcome)
        except (SpecifierError, ConfigurationError, ScanError) as exc:
            outcome.status = _status_for(exc)
            outcome.message = str(exc)
            log.info("runner.failed", status=outcome.status, reason=outcome.message)
            self._host.set_failed(outcome.message)
        return outcome

    def _run(self, settings: LocatorSettings, outcome: RunOutcome) -> None:
        host = self._host

        normalized = normalize_components(settings.components, on_invalid=host.error)
        outcome.normalized = normalized

        pretty_directories = (
            ", ".join(settings.search_directories)
            if settings.search_directories
            else "all directories"
        )
        host.info(
            f"Finding components: {', '.join(normalized.specifiers)} "
            f"in directories: {pretty_directories}"
        )
        for specifier in normalized.specifiers:
            name, version = specifier.split(":", 1)
            host.info(f"Component: {name}, Version: {version}")

        roots = settings.resolve_search_roots()
        scanner = ManifestScanner(
            settings.file_name_regex,
            strict=settings.strict,
            on_warning=host.warning,
        )
        result = scanner.scan(roots, normalized.specifiers)
        outcome.scan = result

        for specifier, path in result.matches.items():
            host.info(f"Found component {specifier} at {path}")

        outcome.unresolved = result.unresolved(normalized.specifiers)
        for specifier in outcome.unresolved:
            host.warning(f"Component {name_of(specifier)} not found")
        if outcome.unresolved:
            outcome.status = "not_found"

        host.set_output(COMPONENT_MAP_OUTPUT, json.dumps(result.matches, sort_keys=True))
