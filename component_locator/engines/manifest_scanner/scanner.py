"""ManifestScanner — depth-first search of search roots for component manifests."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Callable

import structlog

from component_locator.engines.manifest_scanner.manifest import (
    compile_pattern,
    parse_declared_name,
)
from component_locator.engines.manifest_scanner.models import (
    ManifestFailure,
    ManifestMatch,
    ScanResult,
)
from component_locator.errors import ScanError
from component_locator.specifiers import name_of

log = structlog.get_logger("component_locator.engine")

WarningSink = Callable[[str], None]


class ManifestScanner:
    """Resolve requested specifiers to manifest paths under one or more roots.

    *pattern* is matched (``re.search``) against each file's base name.
    With *strict* set, the first unreadable or malformed manifest aborts the
    scan with a ``ScanError``; otherwise it is recorded in
    ``ScanResult.errors`` and the walk continues.
    """

    def __init__(
        self,
        pattern: str | re.Pattern[str] | None = None,
        *,
        strict: bool = False,
        on_warning: WarningSink | None = None,
    ) -> None:
        if isinstance(pattern, re.Pattern):
            self._pattern = pattern
        else:
            self._pattern = compile_pattern(pattern)
        self._strict = strict
        self._on_warning = on_warning

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def is_manifest(self, file_name: str) -> bool:
        return self._pattern.search(file_name) is not None

    def scan(self, roots: list[str | Path], specifiers: list[str]) -> ScanResult:
        """Walk every root and collect matches for *specifiers*.

        An empty *roots* list scans the current working directory.
        """
        result = ScanResult()
        visited: set[str] = set()
        search_roots = [Path(r) for r in roots] or [Path.cwd()]

        for root in search_roots:
            if not root.is_dir():
                log.warning("scanner.root_missing", root=str(root))
                result.missing_roots.append(str(root))
                self._warn(f"Directory {root} does not exist")
                continue
            log.debug("scanner.root_start", root=str(root))
            self._walk(root, specifiers, result, visited)

        log.info(
            "scanner.done",
            manifests=len(result.manifests),
            matches=len(result.matches),
            errors=len(result.errors),
        )
        return result

    # ── traversal ────────────────────────────────────────────────────────

    def _walk(
        self,
        directory: Path,
        specifiers: list[str],
        result: ScanResult,
        visited: set[str],
    ) -> None:
        real = os.path.realpath(directory)
        if real in visited:
            log.debug("scanner.dir_revisited", directory=str(directory))
            return
        visited.add(real)

        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            self._fail(result, ScanError(str(directory), exc.strerror or str(exc)))
            return

        for entry in entries:
            # is_dir/is_file stat symlink targets and may raise EACCES.
            try:
                is_dir = entry.is_dir()
                is_manifest = not is_dir and self.is_manifest(entry.name) and entry.is_file()
            except OSError as exc:
                self._fail(result, ScanError(entry.path, exc.strerror or str(exc)))
                continue

            if is_dir:
                self._walk(Path(entry.path), specifiers, result, visited)
            elif is_manifest:
                self._visit_manifest(Path(entry.path), specifiers, result)

    def _visit_manifest(
        self, file_path: Path, specifiers: list[str], result: ScanResult
    ) -> None:
        resolved = os.path.abspath(file_path)
        try:
            content = file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            self._fail(result, ScanError(resolved, str(exc)))
            return

        try:
            declared = parse_declared_name(file_path, content)
        except ScanError as exc:
            self._fail(result, exc)
            return

        result.manifests.append(resolved)
        result.declared_names.add(declared)

        for specifier in specifiers:
            if name_of(specifier) != declared:
                continue
            previous = result.matches.get(specifier)
            if previous is not None and previous != resolved:
                log.debug(
                    "scanner.match_overwritten",
                    specifier=specifier,
                    old_path=previous,
                    new_path=resolved,
                )
            match: ManifestMatch = result.record(specifier, resolved)
            result.matched_names.add(declared)
            log.info(
                "scanner.manifest_matched",
                specifier=match.requested_specifier,
                path=match.resolved_path,
            )

    def _fail(self, result: ScanResult, exc: ScanError) -> None:
        if self._strict:
            raise exc
        log.warning("scanner.manifest_skipped", path=exc.path, reason=exc.reason)
        result.errors.append(ManifestFailure(path=exc.path, reason=exc.reason))
        self._warn(f"Skipping {exc.path}: {exc.reason}")

    def _warn(self, message: str) -> None:
        if self._on_warning is not None:
            self._on_warning(message)


def scan(
    roots: list[str | Path],
    specifiers: list[str],
    pattern: str | None = None,
    *,
    strict: bool = False,
) -> ScanResult:
    """Scan *roots* for *specifiers* with no host attached."""
    return ManifestScanner(pattern, strict=strict).scan(roots, specifiers)
