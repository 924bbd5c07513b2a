# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Abstractions for integrating xq with batch scheduling systems.

`BatchSetupInterface` is the capability every scheduler backend provides:
building a resource topology snapshot from the scheduler's administration
output, translating node requests into slots, and decoding job IDs.
"""

from .setup import BatchSetupInterface

__all__ = [
    "BatchSetupInterface",
]
