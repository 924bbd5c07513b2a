# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Translation of requested nodes into scheduler slots.

Schedulers such as Grid Engine do not allocate nodes, they allocate slots.
How many slots correspond to one node depends on the allocation rule of
the parallel environment used for the job.
"""

from enum import Enum

from xq_lib.core.error import (
    MalformedRuleError,
    ResourceNotFoundError,
    UnsupportedAllocationError,
)
from xq_lib.core.logger import get_logger

from .parser import INTEGER_REGEX
from .topology import ResourceTopology

logger = get_logger(__name__)


class AllocationRule(str, Enum):
    """
    Symbolic allocation rules of a parallel environment.
    """

    # all slots on a single node
    PE_SLOTS = "$pe_slots"
    # fill a node before using the next one
    FILL_UP = "$fill_up"
    # one slot per node in turn
    ROUND_ROBIN = "$round_robin"

    def __str__(self):
        return self.value


def calculate_slots(
    topology: ResourceTopology,
    environment_name: str,
    queue_name: str,
    node_count: int,
) -> int:
    """
    Calculate the number of slots to request to obtain `node_count` nodes.

    Args:
        topology (ResourceTopology): Snapshot of the scheduler's resources.
        environment_name (str): Name of the parallel environment.
        queue_name (str): Name of the queue.
        node_count (int): Number of nodes requested.

    Returns:
        int: The number of slots to request.

    Raises:
        ResourceNotFoundError: If the environment or queue does not exist,
            or the environment has no allocation rule.
        UnsupportedAllocationError: If the environment only supports single-node jobs
            and more nodes are requested.
        MalformedRuleError: If the allocation rule cannot be interpreted.
    """
    environment = topology.getParallelEnvironment(environment_name)
    queue = topology.getQueue(queue_name)

    if environment is None:
        raise ResourceNotFoundError(
            f"Requested parallel environment '{environment_name}' cannot be found at server."
        )

    if queue is None:
        raise ResourceNotFoundError(
            f"Requested queue '{queue_name}' cannot be found at server."
        )

    rule = environment.allocation_rule
    logger.debug(
        f"Calculating slots to get {node_count} nodes in queue '{queue_name}' "
        f"with parallel environment '{environment_name}' and allocation rule '{rule}'."
    )

    if rule is None:
        raise ResourceNotFoundError(
            f"Cannot determine allocation rule for parallel environment '{environment_name}'."
        )

    match rule:
        case AllocationRule.PE_SLOTS:
            if node_count > 1:
                raise UnsupportedAllocationError(
                    f"Parallel environment '{environment_name}' only supports single node parallel jobs."
                )
            return 1
        case AllocationRule.FILL_UP:
            # all slots of a node are requested before a new node is used
            return node_count * queue.slots
        case AllocationRule.ROUND_ROBIN:
            return node_count

    # the rule is a fixed number of processes per host
    return node_count * _processes_per_host(environment_name, rule)


def _processes_per_host(environment_name: str, rule: str) -> int:
    if not INTEGER_REGEX.match(rule.strip()):
        raise MalformedRuleError(
            f"Illegal allocation rule '{rule}' in parallel environment '{environment_name}'.",
            rule,
        )

    value = int(rule.strip())

    if value <= 0:
        raise MalformedRuleError(
            f"Illegal allocation rule '{rule}' in parallel environment '{environment_name}'. "
            "The number of processes per host must be positive.",
            rule,
        )

    return value
