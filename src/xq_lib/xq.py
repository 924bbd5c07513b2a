# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys

import click
from click_help_colors import HelpColorsGroup

from xq_lib.queues.cli import queues
from xq_lib.slots.cli import slots

__version__ = "0.1.0"

# support both --help and -h
_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(
    cls=HelpColorsGroup,
    help_options_color="bright_blue",
    invoke_without_command=True,
    context_settings=_CONTEXT_SETTINGS,
)
@click.option(
    "--version",
    is_flag=True,
    help="Print the current version of xq and exit.",
)
@click.pass_context
def cli(ctx: click.Context, version: bool):
    """
    Run any xq command.

    xq inspects batch schedulers administered through command-line tools:
    their queues, parallel environments, and the slots needed to allocate nodes.
    """
    if version:
        print(__version__)
        sys.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        sys.exit(0)


cli.add_command(queues)
cli.add_command(slots)
