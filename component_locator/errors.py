"""Custom exceptions for component-locator."""

from __future__ import annotations


class LocatorError(Exception):
    """Base exception for all locator errors."""


class SpecifierError(LocatorError):
    """Raised when no usable component specifier was requested."""


class ConfigurationError(LocatorError):
    """Raised when locator settings are missing or malformed."""


class RepositoryRootError(ConfigurationError):
    """Raised when relative search directories cannot be anchored to a repository root."""


class ScanError(LocatorError):
    """Raised when a manifest or directory cannot be read during a scan."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class ManifestParseError(ScanError):
    """Raised when a manifest is not a YAML mapping with a string ``component`` field."""
