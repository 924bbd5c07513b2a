# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from abc import ABC, abstractmethod

from xq_lib.batch.allocation import calculate_slots
from xq_lib.batch.topology import ResourceTopology


class BatchSetupInterface(ABC):
    """
    Abstract base class for discovering the resources of a batch scheduling system.

    Implementations translate the scheduler's administration commands into
    a `ResourceTopology` and the scheduler's submission output into job IDs.
    """

    @abstractmethod
    def getAdaptorName(self) -> str:
        """
        Retrieve the name of the adaptor.

        Returns:
            str: Name identifying the scheduler dialect, e.g. `gridengine`.
        """
        pass

    @abstractmethod
    def buildTopology(self) -> ResourceTopology:
        """
        Query the scheduler and build a snapshot of its queues and parallel environments.

        The snapshot is only returned if every query succeeds.

        Returns:
            ResourceTopology: The immutable snapshot.

        Raises:
            ParseError: If the output of the scheduler cannot be parsed.
            RemoteOperationError: If an administration command fails.
        """
        pass

    @abstractmethod
    def parseJobId(self, output: str) -> int:
        """
        Extract the numeric ID of a job from the output of a job submission.

        Args:
            output (str): Captured standard output of the submission command.

        Returns:
            int: The job ID.

        Raises:
            ParseError: If no job ID can be found.
        """
        pass

    def calculateSlots(
        self,
        topology: ResourceTopology,
        environment_name: str,
        queue_name: str,
        node_count: int,
    ) -> int:
        """
        Calculate the number of slots needed to obtain `node_count` nodes.

        See `xq_lib.batch.allocation.calculate_slots`.
        """
        return calculate_slots(topology, environment_name, queue_name, node_count)
