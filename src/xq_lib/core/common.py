# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
General utility functions for the xq library.
"""

from functools import lru_cache
from typing import Any

import yaml
from rich.console import Console

from .logger import get_logger

logger = get_logger(__name__)


@lru_cache(maxsize=1)
def load_yaml_dumper() -> type[yaml.Dumper]:
    """Return the fastest available YAML dumper (CDumper if possible)."""
    try:
        from yaml import CDumper as Dumper  # type: ignore[attr-defined]

        logger.debug("Loaded YAML CDumper.")
    except ImportError:
        from yaml import Dumper

        logger.debug("Loaded default YAML dumper.")
    return Dumper


def dump_yaml(data: dict[str, Any]) -> str:
    """
    Serialize a dictionary to YAML, preserving the order of keys.
    """
    return yaml.dump(
        data, default_flow_style=False, sort_keys=False, Dumper=load_yaml_dumper()
    )


def as_cs_list(items: list[str] | tuple[str, ...]) -> str:
    """
    Join items into a comma-separated list as expected by scheduler commands.

    Returns:
        str: The joined items, e.g. `all.q,long.q`.
    """
    return ",".join(items)


def get_panel_width(
    console: Console, nesting: int, min_width: int | None, max_width: int | None
) -> int | None:
    """
    Compute the width of a rich panel, limited to the provided bounds.

    Args:
        console (Console): Console the panel is printed to.
        nesting (int): Number of panels wrapping this panel.
        min_width (int | None): Minimal width of the panel.
        max_width (int | None): Maximal width of the panel.

    Returns:
        int | None: The width of the panel.
    """
    total_width = console.size.width - 4 * nesting

    if min_width is not None and total_width < min_width:
        return min_width

    if max_width is not None and total_width > max_width:
        return max_width

    return total_width
