# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

"""
Configuration system for xq.

This module defines dataclasses representing all configurable aspects of xq,
including environment variables, exit codes, presentation settings, and the
command templates and field names describing a scheduler dialect.

The `Config` class loads user configuration from a TOML file (if available)
and provides a globally accessible `CFG` instance.
"""

import os
import tomllib
from dataclasses import dataclass, field, fields, is_dataclass
from pathlib import Path
from typing import Any, Self


@dataclass
class EnvironmentVariables:
    """Environment variable names used by xq."""

    # Enables xq debug mode.
    debug_mode: str = "XQ_DEBUG"
    # Path to an explicit xq config file.
    config: str = "XQ_CONFIG"


@dataclass
class DateFormats:
    """Date and time format strings."""

    # Standard date format used by xq.
    standard: str = "%Y-%m-%d %H:%M:%S"


@dataclass
class ExitCodes:
    """Exit codes used for various errors."""

    # Default error code for failures of xq commands.
    default: int = 91
    # Returned on an unexpected or unhandled error.
    unexpected_error: int = 99


@dataclass
class QueuesPresenterSettings:
    """Settings for QueuesPresenter."""

    # Maximal width of the queues panel.
    max_width: int | None = None
    # Minimal width of the queues panel.
    min_width: int | None = 60
    # Style used for border lines.
    border_style: str = "white"
    # Style used for the title.
    title_style: str = "white bold"
    # Style used for table headers.
    headers_style: str = "default"
    # Style used for table values.
    main_style: str = "white"
    # Style used for allocation rules.
    secondary_style: str = "grey70"
    # Style of the separators between individual sections of the panel.
    rule_style: str = "white"


@dataclass(frozen=True)
class SchedulerCommands:
    """
    Command templates and field names of one scheduler dialect.

    Every command is a tuple of the executable followed by its fixed arguments.
    The defaults describe Grid Engine (`qconf`).
    """

    # Name of the adaptor reported in errors and scheduler descriptors.
    adaptor_name: str = "gridengine"
    # Lists the names of all queues.
    list_queues: tuple[str, ...] = ("qconf", "-sql")
    # Describes queues; followed by a comma-separated list of queue names.
    describe_queues: tuple[str, ...] = ("qconf", "-sq")
    # Lists the names of all parallel environments.
    list_parallel_environments: tuple[str, ...] = ("qconf", "-spl")
    # Describes parallel environments; followed by one option per environment name.
    describe_parallel_environments: tuple[str, ...] = ("qconf",)
    # Option preceding each parallel environment name.
    parallel_environment_option: str = "-sp"
    # Field starting a new queue record.
    queue_key_field: str = "qname"
    # Field holding the number of slots of a queue.
    slots_field: str = "slots"
    # Field starting a new parallel environment record.
    pe_key_field: str = "pe_name"
    # Field holding the allocation rule of a parallel environment.
    allocation_rule_field: str = "allocation_rule"
    # Exit code reported when no parallel environment is defined.
    no_pe_exit_code: int = 1
    # Message reported when no parallel environment is defined.
    no_pe_marker: str = "no parallel environment defined"
    # Prefixes preceding the job ID in the output of a submission.
    submit_prefixes: tuple[str, ...] = ("Your job ", "Your job-array ")


@dataclass
class Config:
    """Main configuration for xq."""

    env_vars: EnvironmentVariables = field(default_factory=EnvironmentVariables)
    date_formats: DateFormats = field(default_factory=DateFormats)
    exit_codes: ExitCodes = field(default_factory=ExitCodes)
    queues_presenter: QueuesPresenterSettings = field(
        default_factory=QueuesPresenterSettings
    )
    gridengine: SchedulerCommands = field(default_factory=SchedulerCommands)

    # Name of the xq binary.
    binary_name: str = "xq"

    @classmethod
    def load(cls, config_path: Path | None = None) -> Self:
        """
        Load configuration from TOML file or use defaults.

        Args:
            config_path: Explicit path to config file. If None, searches standard locations.

        Returns:
            Config instance with loaded or default values.
        """
        if config_path is None:
            config_path = Config._get_config_path()

        try:
            if config_path and config_path.exists():
                with config_path.open("rb") as f:
                    config_data = tomllib.load(f)
                return _dict_to_dataclass(cls, config_data)
        except Exception as e:
            raise ValueError(f"Could not read xq config '{config_path}': {e}.")

        # no config found - use defaults
        return cls()

    @staticmethod
    def _get_config_path() -> Path | None:
        """
        Search for config file in standard locations (XDG compliant).
        Returns the first existing config file, or None.
        """
        config_locations: list[Path | None] = [
            Path(env_path)
            if (env_path := os.getenv(EnvironmentVariables.config))
            else None,
            Path.cwd() / "xq_config.toml",
            Path(os.getenv("XDG_CONFIG_HOME", Path.home() / ".config"))
            / "xq"
            / "config.toml",
        ]

        for path in config_locations:
            if path and path.is_file():
                return path

        return None


def _dict_to_dataclass(cls, data: dict[str, Any]):
    """
    Recursively convert a dictionary to a dataclass instance.
    Handles nested dataclasses properly. TOML arrays become tuples.
    """
    if not is_dataclass(cls):
        return data

    field_values = {}
    for field_info in fields(cls):
        field_name = field_info.name
        field_type = field_info.type

        if field_name in data:
            value = data[field_name]
            if is_dataclass(field_type) and isinstance(value, dict):
                field_values[field_name] = _dict_to_dataclass(field_type, value)
            elif isinstance(value, list):
                field_values[field_name] = tuple(value)
            else:
                field_values[field_name] = value

    return cls(**field_values)


# Global configuration for xq.
CFG = Config.load()
