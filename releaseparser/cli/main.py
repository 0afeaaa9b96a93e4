"""releaseparser CLI"""

import click

from releaseparser import __version__
from releaseparser.cli.release import describe_command, parse_command, version_command

from .debug import add_debug_option


@click.group()
@click.version_option(__version__, prog_name="relparse")
@click.pass_context
def cli(ctx):
    """
    Parse and describe package@version release identifiers.
    """
    ctx.ensure_object(dict)


cli.add_command(parse_command)
cli.add_command(describe_command)
cli.add_command(version_command)

add_debug_option(cli)

if __name__ == "__main__":
    cli(obj={})
