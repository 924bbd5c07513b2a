# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Translation of node requests into scheduler slots from the command line.

This module implements the `xq slots` command.
"""

from .cli import slots

__all__ = [
    "slots",
]
