"""component-locator: resolve component names to the manifests that declare them."""

__version__ = "0.1.0"

from component_locator.config import LocatorSettings
from component_locator.engines.manifest_scanner import (
    DEFAULT_MANIFEST_PATTERN,
    DOTFILE_MANIFEST_PATTERN,
    ManifestMatch,
    ManifestScanner,
    ScanResult,
)
from component_locator.errors import (
    ConfigurationError,
    LocatorError,
    ManifestParseError,
    RepositoryRootError,
    ScanError,
    SpecifierError,
)
from component_locator.hosts import ConsoleHost, GitHubActionsHost, Host
from component_locator.runner import LocatorRunner, RunOutcome
from component_locator.specifiers import ComponentSpecifier, normalize_components

__all__ = [
    "DEFAULT_MANIFEST_PATTERN",
    "DOTFILE_MANIFEST_PATTERN",
    "ComponentSpecifier",
    "ConfigurationError",
    "ConsoleHost",
    "GitHubActionsHost",
    "Host",
    "LocatorError",
    "LocatorRunner",
    "LocatorSettings",
    "ManifestMatch",
    "ManifestParseError",
    "ManifestScanner",
    "RepositoryRootError",
    "RunOutcome",
    "ScanError",
    "ScanResult",
    "SpecifierError",
    "normalize_components",
]
