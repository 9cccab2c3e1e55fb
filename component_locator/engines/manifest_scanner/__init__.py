"""Manifest scanner engine — locate component manifests under search roots."""

from component_locator.engines.manifest_scanner.manifest import (
    DEFAULT_MANIFEST_PATTERN,
    DOTFILE_MANIFEST_PATTERN,
    parse_declared_name,
)
from component_locator.engines.manifest_scanner.models import (
    ManifestFailure,
    ManifestMatch,
    ScanResult,
)
from component_locator.engines.manifest_scanner.scanner import ManifestScanner, scan

__all__ = [
    "DEFAULT_MANIFEST_PATTERN",
    "DOTFILE_MANIFEST_PATTERN",
    "ManifestFailure",
    "ManifestMatch",
    "ManifestScanner",
    "ScanResult",
    "parse_declared_name",
    "scan",
]
