# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Self

from xq_lib.batch.topology import ResourceTopology
from xq_lib.core.common import dump_yaml


@dataclass(frozen=True, eq=False)
class Scheduler:
    """
    Descriptor of a scheduler reachable through an adaptor.

    The descriptor owns nothing it references: the credential is passed through
    unmodified and never rendered. Two descriptors are only equal if they are
    the same object.

    Attributes:
        adaptor_name (str): Name of the adaptor, e.g. `gridengine`.
        identifier (str): Identifier of the scheduler local to the adaptor.
        location (str): URI the scheduler is reached at.
        queue_names (tuple[str, ...]): Queues of the scheduler in the reported order.
        credential (Any): Opaque credential used for the connection.
        properties (Mapping[str, str]): Adaptor-specific properties.
        is_batch (bool): Scheduler accepts batch jobs.
        is_interactive (bool): Scheduler accepts interactive jobs.
        is_online (bool): Jobs are lost when the connection to the scheduler is closed.
    """

    adaptor_name: str
    identifier: str
    location: str
    queue_names: tuple[str, ...] = ()
    credential: Any = None
    properties: Mapping[str, str] = field(default_factory=dict)
    is_batch: bool = True
    is_interactive: bool = False
    is_online: bool = False

    def __post_init__(self):
        object.__setattr__(self, "queue_names", tuple(self.queue_names))
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    @classmethod
    def fromTopology(
        cls,
        adaptor_name: str,
        identifier: str,
        location: str,
        topology: ResourceTopology,
        credential: Any = None,
        properties: Mapping[str, str] | None = None,
    ) -> Self:
        """
        Construct a descriptor of a batch scheduler whose queues are taken from a topology snapshot.
        """
        return cls(
            adaptor_name,
            identifier,
            location,
            topology.queue_names,
            credential,
            properties or {},
            is_batch=True,
            is_interactive=False,
            is_online=False,
        )

    def getQueueNames(self) -> list[str]:
        return list(self.queue_names)

    def toYaml(self) -> str:
        return dump_yaml(
            {
                "adaptor": self.adaptor_name,
                "identifier": self.identifier,
                "location": self.location,
                "queues": list(self.queue_names),
                "properties": dict(self.properties),
                "batch": self.is_batch,
                "interactive": self.is_interactive,
                "online": self.is_online,
            }
        )

    def __str__(self) -> str:
        return (
            f"Scheduler [adaptor={self.adaptor_name}, identifier={self.identifier}, "
            f"location={self.location}, queues={list(self.queue_names)}, "
            f"properties={dict(self.properties)}, batch={self.is_batch}, "
            f"interactive={self.is_interactive}, online={self.is_online}]"
        )
