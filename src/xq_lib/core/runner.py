# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Execution of administrative commands.

xq does not transport commands itself. Anything able to run a command and
capture its output implements `CommandRunner`; `BashRunner` is the local
implementation used by the xq commands.
"""

import shlex
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .error import RemoteOperationError
from .logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Captured output of a single administrative command."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def success(self) -> bool:
        """True if the command finished with a zero exit code."""
        return self.exit_code == 0


class CommandRunner(ABC):
    """
    Abstract command-execution channel.
    """

    @abstractmethod
    def run(self, command: str, *args: str) -> CommandResult:
        """
        Run a command and capture its output.

        Args:
            command (str): Name of the executable.
            *args (str): Arguments of the command.

        Returns:
            CommandResult: Captured stdout, stderr, and exit code.

        Raises:
            RemoteOperationError: If the command could not be executed at all.
        """
        pass

    def runChecked(self, command: str, *args: str) -> str:
        """
        Run a command and return its standard output.

        Raises:
            RemoteOperationError: If the command exits with a non-zero exit code.
        """
        result = self.run(command, *args)
        if not result.success:
            raise RemoteOperationError(
                f"Command '{shlex.join([command, *args])}' failed with exit code {result.exit_code}: {result.stderr.strip()}.",
                command=[command, *args],
                result=result,
            )

        return result.stdout


class BashRunner(CommandRunner):
    """
    Runs commands on the local machine through bash.
    """

    def run(self, command: str, *args: str) -> CommandResult:
        line = shlex.join([command, *args])
        logger.debug(line)

        try:
            result = subprocess.run(
                ["bash"],
                input=line,
                text=True,
                check=False,
                capture_output=True,
                errors="replace",
            )
        except OSError as e:
            raise RemoteOperationError(
                f"Could not execute '{line}': {e}.", command=[command, *args]
            ) from e

        return CommandResult(result.stdout, result.stderr, result.returncode)
