# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Exception types used throughout xq.

All xq-specific exceptions derive from `XQError` and carry the exit code
used by xq commands to report failures consistently. Errors are raised
synchronously to the immediate caller and never retried.
"""

from typing import TYPE_CHECKING

from xq_lib.core.config import CFG

if TYPE_CHECKING:
    from xq_lib.core.runner import CommandResult


class XQError(Exception):
    """Common exception type for all recoverable xq errors."""

    exit_code = CFG.exit_codes.default


class ParseError(XQError):
    """
    Raised when administrative output does not have the expected shape.

    Attributes:
        line (str | None): The offending raw line or token.
        expected (str | None): Description of the expected shape.
    """

    def __init__(
        self, message: str, line: str | None = None, expected: str | None = None
    ):
        super().__init__(message)
        self.line = line
        self.expected = expected


class RemoteOperationError(XQError):
    """
    Raised when an administrative command fails unexpectedly.

    Attributes:
        command (list[str] | None): The command that failed.
        result (CommandResult | None): Captured output of the command, if it ran.
    """

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        result: "CommandResult | None" = None,
    ):
        super().__init__(message)
        self.command = command
        self.result = result


class ResourceNotFoundError(XQError):
    """Raised when a queue or parallel environment is not known to the scheduler."""

    pass


class UnsupportedAllocationError(XQError):
    """Raised when an allocation request is incompatible with a parallel environment."""

    pass


class MalformedRuleError(XQError):
    """
    Raised when an allocation rule is neither symbolic nor a positive integer.

    Attributes:
        rule (str): The raw allocation rule.
    """

    def __init__(self, message: str, rule: str):
        super().__init__(message)
        self.rule = rule


class InvalidArgumentError(XQError):
    """Raised when a required argument is missing or invalid."""

    pass
