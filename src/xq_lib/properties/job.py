# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Identity of a job submitted to or attached from a scheduler.

A `Job` is identified solely by its UUID. Two jobs with identical description,
scheduler and identifier but different UUIDs are different jobs, while two
instances sharing a UUID are the same job regardless of their other fields.
"""

from dataclasses import dataclass
from typing import Self
from uuid import UUID, uuid4

from xq_lib.core.error import InvalidArgumentError

from .description import JobDescription
from .scheduler import Scheduler


@dataclass(frozen=True, eq=False)
class Job:
    """
    A job known to xq.

    Attributes:
        description (JobDescription): Description of the job.
        scheduler (Scheduler): Scheduler owning the job; not owned by the job.
        uuid (UUID): Process-unique correlation ID.
        identifier (str): Identifier of the job local to the adaptor.
        interactive (bool): The job is run interactively.
        online (bool): The job is lost when the connection to the scheduler closes.
    """

    description: JobDescription
    scheduler: Scheduler
    uuid: UUID
    identifier: str
    interactive: bool = False
    online: bool = False

    def __post_init__(self):
        if self.description is None:
            raise InvalidArgumentError("Job description may not be missing.")

        if self.scheduler is None:
            raise InvalidArgumentError("Scheduler may not be missing.")

        if self.uuid is None:
            raise InvalidArgumentError("Job UUID may not be missing.")

        if not self.identifier:
            raise InvalidArgumentError("Job identifier may not be missing.")

    @classmethod
    def create(
        cls,
        description: JobDescription,
        scheduler: Scheduler,
        identifier: str,
        interactive: bool = False,
        online: bool = False,
    ) -> Self:
        """
        Construct a job with a newly generated UUID.
        """
        return cls(description, scheduler, uuid4(), identifier, interactive, online)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Job):
            return NotImplemented

        return self.uuid == other.uuid

    def __hash__(self) -> int:
        return hash(self.uuid)

    def __str__(self) -> str:
        return (
            f"Job [identifier={self.identifier}, uuid={self.uuid}, "
            f"scheduler={self.scheduler}, description={self.description}, "
            f"interactive={self.interactive}, online={self.online}]"
        )
