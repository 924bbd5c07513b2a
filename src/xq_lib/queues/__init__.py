# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Presentation of scheduler queues and parallel environments.

This module implements the `xq queues` command, which builds a resource
topology snapshot of the scheduler and displays it as a Rich panel or YAML.
"""

from .cli import queues
from .presenter import QueuesPresenter

__all__ = [
    "queues",
    "QueuesPresenter",
]
