"""CLI entry point: component-locator.

Subcommands:
    component-locator find "alpha, beta:2.0" -d services -d libs   # Local search
    component-locator find alpha --dotfile --json                  # .component.yml manifests
    component-locator action                                       # GitHub Actions step
"""

from __future__ import annotations

import sys

import click

from component_locator.config import LocatorSettings
from component_locator.core.logging import setup_logging
from component_locator.engines.manifest_scanner import DOTFILE_MANIFEST_PATTERN
from component_locator.errors import ConfigurationError
from component_locator.hosts import ConsoleHost, GitHubActionsHost
from component_locator.runner import COMPONENT_MAP_OUTPUT, LocatorRunner


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """Component Locator: find the manifests that declare named components."""
    setup_logging("DEBUG" if verbose else None)


@main.command("find")
@click.argument("components")
@click.option(
    "-d",
    "--directory",
    "directories",
    multiple=True,
    help="Search directory (repeatable, or comma separated). Default: current directory.",
)
@click.option("--pattern", default=None, help="Regex matched against manifest file names")
@click.option(
    "--dotfile",
    is_flag=True,
    help="Look for hidden .component.yml/.component.yaml manifests",
)
@click.option(
    "--repository-root",
    default=None,
    envvar="GITHUB_WORKSPACE",
    help="Base for relative search directories",
)
@click.option("--strict", is_flag=True, help="Fail on the first malformed manifest")
@click.option("--json", "as_json", is_flag=True, help="Print the component map as JSON")
def find(
    components: str,
    directories: tuple[str, ...],
    pattern: str | None,
    dotfile: bool,
    repository_root: str | None,
    strict: bool,
    as_json: bool,
) -> None:
    """Resolve COMPONENTS (comma separated name[:version]) to manifest paths."""
    if pattern and dotfile:
        raise click.UsageError("--pattern and --dotfile are mutually exclusive")

    host = ConsoleHost()
    try:
        settings = LocatorSettings.build(
            components=components,
            search_directories=",".join(directories),
            file_name_regex=DOTFILE_MANIFEST_PATTERN if dotfile else pattern,
            repository_root=repository_root,
            strict=strict,
        )
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    outcome = LocatorRunner(host).run(settings)

    if as_json:
        click.echo(host.outputs.get(COMPONENT_MAP_OUTPUT, "{}"))
    elif outcome.matches:
        for specifier, path in sorted(outcome.matches.items()):
            click.echo(f"  {specifier}  {path}")
    elif not outcome.failed:
        click.echo("No components found.")

    sys.exit(host.exit_code)


@main.command("action")
def action() -> None:
    """Run as a GitHub Actions step, reading INPUT_* variables."""
    host = GitHubActionsHost()
    try:
        settings = LocatorSettings.from_action_env()
    except ConfigurationError as e:
        host.set_failed(str(e))
        sys.exit(host.exit_code)

    LocatorRunner(host).run(settings)
    sys.exit(host.exit_code)


if __name__ == "__main__":
    main()
