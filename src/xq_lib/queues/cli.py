# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import sys
from typing import NoReturn

import click
from click_help_colors import HelpColorsCommand
from rich.console import Console

from xq_lib.batch.scripting import ScriptingSetup
from xq_lib.core.config import CFG
from xq_lib.core.error import XQError
from xq_lib.core.logger import get_logger
from xq_lib.core.runner import BashRunner

from .presenter import QueuesPresenter

logger = get_logger(__name__)


@click.command(
    short_help="Display the queues of the scheduler.",
    help="""Display the queues and parallel environments of the scheduler.

Queues are listed in the order reported by the scheduler together with their number of slots.""",
    cls=HelpColorsCommand,
    help_options_color="bright_blue",
)
@click.option("--yaml", is_flag=True, help="Output the topology in YAML format.")
def queues(yaml: bool) -> NoReturn:
    try:
        setup = ScriptingSetup.gridEngine(BashRunner())
        topology = setup.buildTopology()

        presenter = QueuesPresenter(topology, setup.getAdaptorName())
        if yaml:
            presenter.dumpYaml()
        else:
            console = Console(record=False, markup=False)
            panel = presenter.createQueuesInfoPanel(console)
            console.print(panel)
        sys.exit(0)
    except XQError as e:
        logger.error(e)
        print()
        sys.exit(CFG.exit_codes.default)
    except Exception as e:
        logger.critical(e, exc_info=True, stack_info=True)
        print()
        sys.exit(CFG.exit_codes.unexpected_error)
