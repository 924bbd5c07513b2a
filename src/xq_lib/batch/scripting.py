# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Setup of schedulers administered through command-line tools.

`ScriptingSetup` implements `BatchSetupInterface` for any scheduler whose
administration tools print queue and parallel-environment descriptions as
key/value records. Schedulers only differ in their `SchedulerCommands`.
"""

import shlex

from xq_lib.batch.interface import BatchSetupInterface
from xq_lib.batch.parser import (
    parse_job_id_from_line,
    parse_key_value_records,
    parse_list,
)
from xq_lib.batch.topology import ParallelEnvironmentInfo, QueueInfo, ResourceTopology
from xq_lib.core.common import as_cs_list
from xq_lib.core.config import CFG, SchedulerCommands
from xq_lib.core.error import ParseError, RemoteOperationError
from xq_lib.core.logger import get_logger
from xq_lib.core.runner import CommandRunner

logger = get_logger(__name__)


class ScriptingSetup(BatchSetupInterface):
    """
    Discovers queues and parallel environments using administration commands.
    """

    def __init__(self, commands: SchedulerCommands, runner: CommandRunner):
        """
        Args:
            commands (SchedulerCommands): Command templates and field names of the scheduler.
            runner (CommandRunner): Channel used to run the commands.
        """
        self._commands = commands
        self._runner = runner

    @classmethod
    def gridEngine(cls, runner: CommandRunner) -> "ScriptingSetup":
        """
        Create a setup for Grid Engine using the configured commands.
        """
        return cls(CFG.gridengine, runner)

    def getAdaptorName(self) -> str:
        return self._commands.adaptor_name

    def buildTopology(self) -> ResourceTopology:
        queue_names = parse_list(self._runner.runChecked(*self._commands.list_queues))
        queues = self._getQueues(queue_names)
        parallel_environments = self._getParallelEnvironments()

        topology = ResourceTopology.fromInfo(queue_names, queues, parallel_environments)
        logger.debug(f"Created setup info: {topology}.")
        return topology

    def parseJobId(self, output: str) -> int:
        for line in output.splitlines():
            if line.strip():
                return parse_job_id_from_line(
                    line.strip(), self._commands.submit_prefixes
                )

        raise ParseError(
            "Failed to get job ID. Submission produced no output.",
            expected="submission message",
        )

    def _getQueues(self, queue_names: list[str]) -> list[QueueInfo]:
        """
        Describe all queues with a single command.
        """
        if not queue_names:
            logger.debug("Scheduler reports no queues.")
            return []

        output = self._runner.runChecked(
            *self._commands.describe_queues, as_cs_list(queue_names)
        )
        records = parse_key_value_records(output, self._commands.queue_key_field)

        return [
            QueueInfo.fromDict(name, info, self._commands.slots_field)
            for name, info in records.items()
        ]

    def _getParallelEnvironments(self) -> list[ParallelEnvironmentInfo]:
        """
        List and describe all parallel environments.

        Having no parallel environment defined is not an error.
        """
        command = self._commands.list_parallel_environments
        result = self._runner.run(*command)

        if (
            result.exit_code == self._commands.no_pe_exit_code
            and self._commands.no_pe_marker in result.stderr
        ):
            logger.debug("Scheduler reports no parallel environments.")
            return []

        if not result.success:
            raise RemoteOperationError(
                f"Could not get parallel environment info from scheduler: '{shlex.join(command)}' "
                f"failed with exit code {result.exit_code}: {result.stderr.strip()}.",
                command=list(command),
                result=result,
            )

        names = parse_list(result.stdout)
        if not names:
            return []

        # a single command describes all environments
        arguments = [
            argument
            for name in names
            for argument in (self._commands.parallel_environment_option, name)
        ]
        output = self._runner.runChecked(
            *self._commands.describe_parallel_environments, *arguments
        )
        records = parse_key_value_records(output, self._commands.pe_key_field)

        return [
            ParallelEnvironmentInfo.fromDict(
                name, info, self._commands.allocation_rule_field
            )
            for name, info in records.items()
        ]
