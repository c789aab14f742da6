# SPDX-License-Identifier: MIT
"""CLI entry point for the revsemver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import click

from .compare import compare_versions, sort_versions
from .config import ConfigError, SemverConfig, load_config
from .errors import VersionError
from .semver import Version, parse_tolerant, parse_version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemverConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None
        self.tolerant: Optional[bool] = None

    def load_config(self) -> SemverConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            try:
                self.config = load_config(self.project_dir)
            except ConfigError as e:
                echo_error(str(e))
                sys.exit(1)
        return self.config

    @property
    def parser(self) -> Callable[[str], Version]:
        """Return the parse function selected by flags or configuration."""
        tolerant = self.tolerant
        if tolerant is None:
            tolerant = self.load_config().tolerant
        return parse_tolerant if tolerant else parse_version

    def parse(self, version_string: str) -> Version:
        """Parse a version, reporting failures and exiting with status 1."""
        try:
            return self.parser(version_string)
        except VersionError as e:
            echo_error(e.message)
            sys.exit(1)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


@click.group()
@click.version_option(package_name="revsemver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Load configuration from this directory.",
)
@click.option(
    "--tolerant/--strict",
    default=None,
    help="Accept 'v' prefixes, leading zeroes and short forms.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path], tolerant: Optional[bool]) -> None:
    """Parse, compare, sort and bump extended semantic versions.

    \b
    Examples:
        revsemver parse 1.2.3.4-rc.1+build.5
        revsemver compare 1.2.3 1.2.3.0
        revsemver sort 0.1.0 1.0.0 0.0.1
        revsemver bump minor 1.2.3.4
        revsemver --tolerant finalize v1.2-rc.1
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    ctx.tolerant = tolerant
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@cli.command()
@click.argument("version")
@pass_context
def parse(ctx: Context, version: str) -> None:
    """Parse VERSION and print its components."""
    v = ctx.parse(version)
    echo_info(str(v))
    if ctx.verbose:
        echo_info(f"  major: {v.major}")
        echo_info(f"  minor: {v.minor}")
        echo_info(f"  patch: {v.patch}")
        if v.has_revision:
            echo_info(f"  revision: {v.revision}")
        if v.prerelease:
            echo_info(f"  prerelease: {'.'.join(str(p) for p in v.prerelease)}")
        if v.build:
            echo_info(f"  build: {'.'.join(v.build)}")


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is less than, equal to or greater than VERSION2."""
    echo_info(str(compare_versions(ctx.parse(version1), ctx.parse(version2))))


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@click.option(
    "--reverse/--no-reverse",
    default=None,
    help="Sort in descending order.",
)
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: Optional[bool]) -> None:
    """Print VERSIONS in ascending order, one per line."""
    if reverse is None:
        reverse = ctx.load_config().reverse
    for v in sort_versions([ctx.parse(version) for version in versions], reverse=reverse):
        echo_info(str(v))


_BUMPS = {
    "major": Version.increment_major,
    "minor": Version.increment_minor,
    "patch": Version.increment_patch,
    "revision": Version.increment_revision,
}


@cli.command()
@click.argument("part", type=click.Choice(sorted(_BUMPS)))
@click.argument("version")
@click.option(
    "--finalize",
    is_flag=True,
    help="Drop pre-release and build metadata from the result.",
)
@pass_context
def bump(ctx: Context, part: str, version: str, finalize: bool) -> None:
    """Increment PART of VERSION and print the result."""
    v = _BUMPS[part](ctx.parse(version))
    if finalize:
        v = v.finalize()
    echo_info(str(v))


@cli.command()
@click.argument("version")
@pass_context
def finalize(ctx: Context, version: str) -> None:
    """Print VERSION without pre-release or build metadata."""
    echo_info(ctx.parse(version).finalize_version())


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def validate(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that every VERSION parses."""
    failures = 0
    for version in versions:
        try:
            ctx.parser(version)
        except VersionError as e:
            echo_error(f"{version!r}: {e.message} [{e.code}]")
            failures += 1

    if failures:
        sys.exit(1)
    echo_success(f"{len(versions)} version(s) valid")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
