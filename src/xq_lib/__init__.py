# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core implementation of the xq command-line tool.

This package lets one client work with batch schedulers that only expose a
textual administration interface. It provides parsers for the output of the
administration tools, an immutable snapshot of the scheduler's queues and
parallel environments, the translation of node requests into slots, and the
identity model of jobs and schedulers.
"""

from .xq import __version__, cli

__all__ = [
    "__version__",
    "cli",
    "batch",
    "core",
    "properties",
    "queues",
    "slots",
]
