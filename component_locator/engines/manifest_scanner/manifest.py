"""Manifest file patterns and the YAML ``component`` declaration parser."""

from __future__ import annotations

import re
from pathlib import Path

import yaml

from component_locator.errors import ManifestParseError

# Visible form used by most repositories: component.yml / component.yaml
DEFAULT_MANIFEST_PATTERN = r"^component\.ya?ml$"
# Hidden form: .component.yml / .component.yaml
DOTFILE_MANIFEST_PATTERN = r"^\.component\.ya?ml$"

COMPONENT_KEY = "component"


def compile_pattern(pattern: str | None) -> re.Pattern[str]:
    """Compile a manifest filename pattern, falling back to the default."""
    return re.compile(pattern or DEFAULT_MANIFEST_PATTERN)


def parse_declared_name(file_path: Path, content: str) -> str:
    """Return the component name a manifest declares.

    Raises ``ManifestParseError`` if *content* is not a YAML mapping carrying
    a non-empty string ``component`` field.
    """
    try:
        data = yaml.safe_load(content)
    except (yaml.YAMLError, ValueError) as exc:
        raise ManifestParseError(str(file_path), f"invalid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ManifestParseError(str(file_path), "manifest is not a mapping")

    name = data.get(COMPONENT_KEY)
    if not isinstance(name, str) or not name:
        raise ManifestParseError(
            str(file_path), f"missing or non-string '{COMPONENT_KEY}' field"
        )
    return name
