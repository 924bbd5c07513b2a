# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Immutable snapshot of the resources reported by a scheduler.

A `ResourceTopology` is built once per scheduler connection and then only
read. It holds the queues in the order the scheduler reported them and the
parallel environments available for multi-process jobs.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self

from xq_lib.core.common import dump_yaml
from xq_lib.core.error import ParseError
from xq_lib.core.logger import get_logger

from .parser import INTEGER_REGEX

logger = get_logger(__name__)


@dataclass(frozen=True)
class QueueInfo:
    """
    Properties of a single queue.

    Attributes:
        name (str): Name of the queue.
        slots (int): Number of slots available on each node of the queue.
        info (Mapping[str, str]): All properties reported for the queue.
    """

    name: str
    slots: int
    info: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )

    @classmethod
    def fromDict(cls, name: str, info: dict[str, str], slots_field: str) -> Self:
        """
        Construct a new QueueInfo from a parsed queue record.

        Args:
            name (str): Name of the queue.
            info (dict[str, str]): Properties of the queue as reported by the scheduler.
            slots_field (str): Name of the property holding the slot count.

        Returns:
            Self: A new instance of QueueInfo.

        Raises:
            ParseError: If the slot count is missing or not a number.
        """
        if (raw_slots := info.get(slots_field)) is None:
            raise ParseError(
                f"Queue '{name}' does not report the number of slots ('{slots_field}').",
                expected=f"field '{slots_field}'",
            )

        return cls(name, _parse_slots(name, raw_slots), MappingProxyType(dict(info)))

    def toDict(self) -> dict[str, Any]:
        return {"name": self.name, "slots": self.slots, "info": dict(self.info)}


@dataclass(frozen=True)
class ParallelEnvironmentInfo:
    """
    Properties of a single parallel environment.

    Attributes:
        name (str): Name of the parallel environment.
        allocation_rule (str | None): How slots are distributed over nodes,
            e.g. `$fill_up`, `$round_robin`, `$pe_slots` or a number of slots per node.
        info (Mapping[str, str]): All properties reported for the environment.
    """

    name: str
    allocation_rule: str | None
    info: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )

    @classmethod
    def fromDict(cls, name: str, info: dict[str, str], rule_field: str) -> Self:
        """
        Construct a new ParallelEnvironmentInfo from a parsed record.

        A missing allocation rule is kept as None and only reported once
        an allocation is requested.
        """
        return cls(name, info.get(rule_field), MappingProxyType(dict(info)))

    def toDict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "allocation_rule": self.allocation_rule,
            "info": dict(self.info),
        }


@dataclass(frozen=True, eq=False)
class ResourceTopology:
    """
    Queues and parallel environments of a scheduler.

    Use `ResourceTopology.fromInfo` to construct the snapshot; the mappings
    are read-only.
    """

    queue_names: tuple[str, ...]
    queues: Mapping[str, QueueInfo]
    parallel_environments: Mapping[str, ParallelEnvironmentInfo]

    @classmethod
    def fromInfo(
        cls,
        queue_names: Iterable[str],
        queues: Iterable[QueueInfo],
        parallel_environments: Iterable[ParallelEnvironmentInfo],
    ) -> Self:
        """
        Construct a new snapshot.

        Args:
            queue_names (Iterable[str]): Queue names in the order reported by the scheduler.
            queues (Iterable[QueueInfo]): Descriptions of the queues.
            parallel_environments (Iterable[ParallelEnvironmentInfo]): Descriptions
                of the parallel environments.

        Returns:
            Self: A new immutable ResourceTopology.
        """
        return cls(
            tuple(queue_names),
            MappingProxyType({queue.name: queue for queue in queues}),
            MappingProxyType({pe.name: pe for pe in parallel_environments}),
        )

    def getQueueNames(self) -> list[str]:
        """
        Return the names of all queues in the order reported by the scheduler.
        """
        return list(self.queue_names)

    def getQueue(self, name: str) -> QueueInfo | None:
        return self.queues.get(name)

    def getParallelEnvironment(self, name: str) -> ParallelEnvironmentInfo | None:
        return self.parallel_environments.get(name)

    def toYaml(self) -> str:
        """
        Return the snapshot in YAML format.
        """
        return dump_yaml(
            {
                "queues": [
                    self.queues[name].toDict()
                    for name in self.queue_names
                    if name in self.queues
                ],
                "parallel_environments": [
                    pe.toDict() for pe in self.parallel_environments.values()
                ],
            }
        )

    def __str__(self) -> str:
        return (
            f"ResourceTopology [queues={list(self.queue_names)}, "
            f"parallel_environments={list(self.parallel_environments)}]"
        )


def _parse_slots(queue: str, raw: str) -> int:
    """
    Parse the slot count of a queue.

    Grid Engine may append per-host overrides (`1,[node1=4]`); only the
    default value before the first comma is used.
    """
    default = raw.split(",", 1)[0].strip()
    if not INTEGER_REGEX.match(default):
        raise ParseError(
            f"Could not parse the number of slots '{raw}' of queue '{queue}'.",
            line=raw,
            expected="integer slot count",
        )

    return int(default)
