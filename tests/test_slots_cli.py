# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from xq_lib.core.config import CFG
from xq_lib.core.error import UnsupportedAllocationError
from xq_lib.slots import slots


def test_slots_command_prints_slot_count():
    runner = CliRunner()

    with patch("xq_lib.slots.cli.ScriptingSetup.gridEngine") as mock_setup_factory:
        mock_setup = MagicMock()
        mock_setup.calculateSlots.return_value = 24
        mock_setup_factory.return_value = mock_setup

        result = runner.invoke(slots, ["mpi", "all.q", "3"])

    assert result.exit_code == 0
    assert result.output.strip() == "24"
    mock_setup.calculateSlots.assert_called_once_with(
        mock_setup.buildTopology.return_value, "mpi", "all.q", 3
    )


def test_slots_command_rejects_zero_nodes():
    runner = CliRunner()

    with patch("xq_lib.slots.cli.ScriptingSetup.gridEngine") as mock_setup_factory:
        result = runner.invoke(slots, ["mpi", "all.q", "0"])

    assert result.exit_code == 2
    mock_setup_factory.assert_not_called()


def test_slots_command_handles_xq_error():
    runner = CliRunner()

    with (
        patch("xq_lib.slots.cli.ScriptingSetup.gridEngine") as mock_setup_factory,
        patch("xq_lib.slots.cli.logger") as mock_logger,
    ):
        mock_setup = MagicMock()
        mock_setup.calculateSlots.side_effect = UnsupportedAllocationError(
            "single node only"
        )
        mock_setup_factory.return_value = mock_setup

        result = runner.invoke(slots, ["smp", "all.q", "2"])

    assert result.exit_code == CFG.exit_codes.default
    mock_logger.error.assert_called_once()


def test_slots_command_handles_unexpected_error():
    runner = CliRunner()

    with (
        patch("xq_lib.slots.cli.ScriptingSetup.gridEngine") as mock_setup_factory,
        patch("xq_lib.slots.cli.logger") as mock_logger,
    ):
        mock_setup_factory.return_value.buildTopology.side_effect = KeyError("x")

        result = runner.invoke(slots, ["mpi", "all.q", "2"])

    assert result.exit_code == CFG.exit_codes.unexpected_error
    mock_logger.critical.assert_called_once()
