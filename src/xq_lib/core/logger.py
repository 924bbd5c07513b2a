# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Logging setup shared by all xq modules.

Every module obtains its logger through `get_logger(__name__)`. Records are
rendered by rich on stderr so that the output of xq commands (slot counts,
YAML dumps) stays clean on stdout and can be piped into job scripts.
"""

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

from .config import CFG


def get_logger(name: str, show_time: bool = False) -> logging.Logger:
    """
    Return a logger writing to stderr through rich's RichHandler.

    Debug messages and timestamps are shown when the debug environment
    variable is set. Calling this repeatedly for the same name replaces
    the handler instead of stacking another one.

    Args:
        name (str): Name of the logger, usually the module's `__name__`.
        show_time (bool): Show timestamps even outside debug mode.

    Returns:
        logging.Logger: The configured logger.
    """
    debug_mode = _is_debug_mode()
    level = logging.DEBUG if debug_mode else logging.INFO

    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    logger.addHandler(_create_handler(level, show_time or debug_mode))
    logger.propagate = False

    return logger


def _is_debug_mode() -> bool:
    return os.environ.get(CFG.env_vars.debug_mode) is not None


def _create_handler(level: int, show_time: bool) -> RichHandler:
    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_path=False,
        show_level=True,
        show_time=show_time,
        log_time_format=CFG.date_formats.standard,
        tracebacks_width=None,
        tracebacks_code_width=None,
    )
    handler.setLevel(level)

    return handler
