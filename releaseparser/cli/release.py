"""cli commands to inspect release identifiers"""

import click

from releaseparser.constants import DEFAULT_OUTPUT_FORMAT, OutputFormat
from releaseparser.model import dump_release, dump_version
from releaseparser.versioning import (
    InvalidRelease,
    InvalidVersion,
    parse_release,
    parse_version,
)

from releaseparser.cli.utils.logging import logger
from .debug import add_debug_option
from .error_formatting import pretty_print_release_error, pretty_print_version_error

format_option = click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice([f.value for f in OutputFormat]),
    default=DEFAULT_OUTPUT_FORMAT.value,
    show_default=True,
    help="Output format.",
    envvar="RELPARSE_FORMAT",
)


def _load_release(ctx: click.Context, release: str):
    try:
        return parse_release(release)
    except InvalidRelease as e:
        click.echo(pretty_print_release_error(e), err=True)
        ctx.exit(1)


@add_debug_option
@click.command(name="parse")
@click.argument("release")
@format_option
@click.pass_context
def parse_command(ctx, release: str, fmt: str):
    """Parse a release and print its structure."""
    r = _load_release(ctx, release)
    if r.version is None:
        logger.debug(f"No version could be parsed from '{r.version_raw}'")
    click.echo(dump_release(r, OutputFormat(fmt)).rstrip("\n"))


@add_debug_option
@click.command(name="describe")
@click.argument("release")
@click.pass_context
def describe_command(ctx, release: str):
    """Print a short description of a release."""
    r = _load_release(ctx, release)
    click.echo(r.describe())


@add_debug_option
@click.command(name="version")
@click.argument("version")
@format_option
@click.option(
    "--semver",
    "as_semver_",
    is_flag=True,
    default=False,
    help="Print the version converted to a semantic version.",
)
@click.pass_context
def version_command(ctx, version: str, fmt: str, as_semver_: bool):
    """Parse a version and print its structure."""
    try:
        v = parse_version(version)
    except InvalidVersion as e:
        click.echo(pretty_print_version_error(e), err=True)
        ctx.exit(1)

    if as_semver_:
        try:
            from releaseparser.versioning.semantic import as_semver
        except ImportError:
            click.echo(
                "semver support is not installed, install releaseparser[semver]",
                err=True,
            )
            ctx.exit(1)
        click.echo(str(as_semver(v)))
        return

    click.echo(dump_version(v, OutputFormat(fmt)).rstrip("\n"))
