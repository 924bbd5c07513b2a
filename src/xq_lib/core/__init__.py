# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Core infrastructure for xq.

This module collects the foundational pieces used across the xq codebase:
configuration, structured logging, error types, and the command-execution
channel through which scheduler administration tools are run.
"""
