# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand

from xq_lib.batch.scripting import ScriptingSetup
from xq_lib.core.config import CFG
from xq_lib.core.error import XQError
from xq_lib.core.logger import get_logger
from xq_lib.core.runner import BashRunner

logger = get_logger(__name__)


@click.command(
    short_help="Calculate the slots needed for a number of nodes.",
    help="""Calculate the number of slots to request in QUEUE with parallel environment PE
to obtain NODES nodes.

The result depends on the allocation rule of the parallel environment.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.argument("pe", type=str, metavar="PE")
@click.argument("queue", type=str, metavar="QUEUE")
@click.argument("nodes", type=click.IntRange(min=1), metavar="NODES")
def slots(pe: str, queue: str, nodes: int) -> NoReturn:
    try:
        setup = ScriptingSetup.gridEngine(BashRunner())
        topology = setup.buildTopology()

        print(setup.calculateSlots(topology, pe, queue, nodes))
        sys.exit(0)
    except XQError as e:
        logger.error(e)
        print()
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        print()
        sys.exit(CFG.exit_codes.unexpected_error)
