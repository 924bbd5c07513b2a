# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from dataclasses import asdict, dataclass, field

from xq_lib.core.common import dump_yaml


@dataclass
class JobDescription:
    """
    Description of a job to run on a scheduler.
    """

    # Executable to run.
    executable: str | None = None
    # Arguments passed to the executable.
    arguments: list[str] = field(default_factory=list)
    # Environment variables set for the job.
    environment: dict[str, str] = field(default_factory=dict)
    # Queue to submit the job to. If not set, the scheduler's default queue is used.
    queue_name: str | None = None
    # Parallel environment used to allocate multiple nodes.
    parallel_environment: str | None = None
    # Number of nodes requested.
    node_count: int = 1
    # Number of processes started on each node.
    processes_per_node: int = 1
    # Maximal run time in minutes.
    max_time: int = 15
    # Working directory of the job.
    working_directory: str | None = None
    # Files connected to the standard streams of the job.
    stdin: str | None = None
    stdout: str | None = None
    stderr: str | None = None
    # Whether the job is run interactively.
    interactive: bool = False

    def toYaml(self) -> str:
        """
        Return the description in YAML format.
        """
        return dump_yaml(asdict(self))

    def __str__(self) -> str:
        return (
            f"JobDescription [executable={self.executable}, arguments={self.arguments}, "
            f"environment={self.environment}, queue={self.queue_name}, "
            f"parallel_environment={self.parallel_environment}, nodes={self.node_count}, "
            f"processes_per_node={self.processes_per_node}, max_time={self.max_time}, "
            f"working_directory={self.working_directory}, stdin={self.stdin}, "
            f"stdout={self.stdout}, stderr={self.stderr}, interactive={self.interactive}]"
        )
