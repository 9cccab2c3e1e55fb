"""Locator settings — CLI flags or GitHub Actions inputs, validated with pydantic."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from component_locator.engines.manifest_scanner.manifest import DEFAULT_MANIFEST_PATTERN
from component_locator.errors import ConfigurationError, RepositoryRootError

_TRUE_VALUES = {"true", "1", "yes", "on"}
_FALSE_VALUES = {"false", "0", "no", "off"}


def input_env_name(name: str) -> str:
    """Environment variable the Actions runner uses for input *name*."""
    return "INPUT_" + name.replace(" ", "_").upper()


def get_input(environ: Mapping[str, str], name: str) -> str:
    """Read an action input, trimmed; an unset input reads as an empty string."""
    return environ.get(input_env_name(name), "").strip()


def get_boolean_input(environ: Mapping[str, str], name: str, default: bool = False) -> bool:
    raw = environ.get(input_env_name(name))
    if raw is None:
        return default
    value = raw.strip().lower()
    if not value:
        return default
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigurationError(
        f"Input does not meet YAML 1.2 \"Core Schema\" specification: {name}"
    )


class LocatorSettings(BaseModel):
    """Everything one locator run needs besides the host."""

    model_config = ConfigDict(frozen=True)

    components: str = ""
    search_directories: list[str] = []
    file_name_regex: str = DEFAULT_MANIFEST_PATTERN
    repository_root: str | None = None
    strict: bool = False

    @field_validator("components", mode="before")
    @classmethod
    def _strip_components(cls, v: str | None) -> str:
        return v.strip() if isinstance(v, str) else ""

    @field_validator("search_directories", mode="before")
    @classmethod
    def _split_directories(cls, v: str | list[str] | None) -> list[str]:
        if v is None:
            return []
        parts = v.split(",") if isinstance(v, str) else v
        return [p.strip() for p in parts if p and p.strip()]

    @field_validator("file_name_regex", mode="before")
    @classmethod
    def _default_regex(cls, v: str | None) -> str:
        return v.strip() if isinstance(v, str) and v.strip() else DEFAULT_MANIFEST_PATTERN

    @field_validator("file_name_regex")
    @classmethod
    def _compile_regex(cls, v: str) -> str:
        try:
            re.compile(v)
        except re.error as exc:
            raise ValueError(f"invalid component file name regex {v!r}: {exc}") from exc
        return v

    @field_validator("repository_root", mode="before")
    @classmethod
    def _blank_root_is_none(cls, v: str | None) -> str | None:
        return v.strip() if isinstance(v, str) and v.strip() else None

    @classmethod
    def build(cls, **values: object) -> LocatorSettings:
        """Validate *values*, raising ``ConfigurationError`` instead of pydantic's error."""
        try:
            return cls(**values)
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            raise ConfigurationError(messages) from exc

    @classmethod
    def from_action_env(cls, environ: Mapping[str, str] | None = None) -> LocatorSettings:
        """Build settings from the ``INPUT_*`` variables of a GitHub Actions step.

        ``components`` is not enforced here; an empty value is reported by the
        runner so it surfaces through the host like any other fatal outcome.
        """
        env = os.environ if environ is None else environ
        return cls.build(
            components=get_input(env, "components"),
            search_directories=get_input(env, "component-search-directories"),
            file_name_regex=get_input(env, "component-file-name-regex"),
            repository_root=env.get("GITHUB_WORKSPACE"),
            strict=get_boolean_input(env, "strict"),
        )

    def resolve_search_roots(self) -> list[str]:
        """Return absolute search roots, anchoring relative ones at the repository root.

        An empty list means "scan the current working directory".
        """
        roots: list[str] = []
        for directory in self.search_directories:
            path = Path(directory)
            if path.is_absolute():
                roots.append(os.path.normpath(path))
                continue
            if self.repository_root is None:
                raise RepositoryRootError(
                    f"Cannot resolve relative search directory {directory!r}: "
                    "no repository root (set GITHUB_WORKSPACE or --repository-root)."
                )
            roots.append(os.path.normpath(Path(self.repository_root).resolve() / path))
        return roots
