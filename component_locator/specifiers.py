"""Component specifier parsing and normalization.

A specifier is ``name[:version]``. Normalization turns the raw comma-separated
request text into canonical ``name:version`` strings, defaulting the version to
``latest`` and dropping tokens that do not match the allowed character set.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

import structlog

from component_locator.errors import SpecifierError

log = structlog.get_logger("component_locator.specifiers")

DEFAULT_VERSION = "latest"

VALID_COMPONENT_RE = re.compile(r"^[a-zA-Z0-9_\-.]+(:[a-zA-Z0-9_\-.]+)?$")


@dataclass(frozen=True)
class ComponentSpecifier:
    """A requested component, identified by name and an opaque version label."""

    name: str
    version: str = DEFAULT_VERSION

    def __str__(self) -> str:
        return f"{self.name}:{self.version}"

    @classmethod
    def parse(cls, token: str) -> ComponentSpecifier:
        """Parse a single trimmed token, raising ``SpecifierError`` if it is malformed."""
        if not VALID_COMPONENT_RE.match(token):
            raise SpecifierError(f"Invalid component name: {token}")
        if ":" in token:
            name, version = token.split(":", 1)
            return cls(name=name, version=version)
        return cls(name=token)


@dataclass
class NormalizeResult:
    """Outcome of normalizing one batch of raw tokens."""

    specifiers: list[str] = field(default_factory=list)
    rejected: list[str] = field(default_factory=list)

    @property
    def names(self) -> list[str]:
        return [name_of(s) for s in self.specifiers]


def name_of(specifier: str) -> str:
    """Return the name portion of a canonical specifier string."""
    return specifier.split(":", 1)[0]


def split_tokens(raw: str | None) -> list[str]:
    """Split comma-separated text into trimmed, non-empty tokens."""
    if not raw:
        return []
    return [t for t in (part.strip() for part in raw.split(",")) if t]


def normalize(tokens: list[str], on_invalid=None) -> NormalizeResult:
    """Validate *tokens* and return their canonical ``name:version`` forms.

    Invalid tokens are skipped; each one is passed to *on_invalid* (if given)
    so the caller can surface a diagnostic. Order and duplicates are kept.
    """
    result = NormalizeResult()
    for raw in tokens:
        token = raw.strip()
        if not token:
            continue
        try:
            spec = ComponentSpecifier.parse(token)
        except SpecifierError as exc:
            log.debug("specifier.rejected", token=token)
            result.rejected.append(token)
            if on_invalid is not None:
                on_invalid(str(exc))
            continue
        log.debug("specifier.accepted", name=spec.name, version=spec.version)
        result.specifiers.append(str(spec))
    return result


def normalize_components(raw: str | None, on_invalid=None) -> NormalizeResult:
    """Normalize the raw ``components`` input, failing if nothing usable remains.

    Raises ``SpecifierError`` when the input is blank or when every token is
    rejected.
    """
    tokens = split_tokens(raw)
    if not tokens:
        raise SpecifierError("No components provided to search for.")

    result = normalize(tokens, on_invalid=on_invalid)
    if not result.specifiers:
        raise SpecifierError("No valid components provided to search for.")
    return result
