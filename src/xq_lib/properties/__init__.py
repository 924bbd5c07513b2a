# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Identity model for jobs and schedulers.

This module provides the value objects describing what a job is
(`JobDescription`), which scheduler owns it (`Scheduler`), and how a
submitted or attached job is identified (`Job`).
"""

from .description import JobDescription
from .job import Job
from .scheduler import Scheduler

__all__ = [
    "Job",
    "JobDescription",
    "Scheduler",
]
