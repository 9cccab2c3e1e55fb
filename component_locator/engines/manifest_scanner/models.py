"""Data models for the manifest scanner engine."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class ManifestMatch:
    """A requested specifier resolved to the manifest that declares its name."""

    requested_specifier: str
    resolved_path: str


@dataclass
class ManifestFailure:
    """A manifest or directory that could not be read or parsed (lenient mode)."""

    path: str
    reason: str


@dataclass
class ScanResult:
    """Everything one scan observed across its search roots."""

    matches: dict[str, str] = field(default_factory=dict)
    declared_names: set[str] = field(default_factory=set)
    matched_names: set[str] = field(default_factory=set)
    manifests: list[str] = field(default_factory=list)
    missing_roots: list[str] = field(default_factory=list)
    errors: list[ManifestFailure] = field(default_factory=list)

    def record(self, specifier: str, path: str) -> ManifestMatch:
        # Last write wins for a specifier seen in several manifests.
        self.matches[specifier] = path
        return ManifestMatch(requested_specifier=specifier, resolved_path=path)

    def unresolved(self, specifiers: list[str]) -> list[str]:
        """Return requested specifiers whose name no manifest declared, in request order."""
        return [s for s in specifiers if s.split(":", 1)[0] not in self.matched_names]
