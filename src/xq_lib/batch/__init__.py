# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Batch-system support for xq.

This module groups the components that let xq understand batch schedulers:
parsers for the output of administration tools, the resource topology
snapshot, the translation of node requests into slots, and the generic
setup driven by per-scheduler command templates.
"""

from .allocation import AllocationRule, calculate_slots
from .scripting import ScriptingSetup
from .topology import ParallelEnvironmentInfo, QueueInfo, ResourceTopology

__all__ = [
    "AllocationRule",
    "ParallelEnvironmentInfo",
    "QueueInfo",
    "ResourceTopology",
    "ScriptingSetup",
    "calculate_slots",
]
