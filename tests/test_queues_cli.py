# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from xq_lib.core.config import CFG
from xq_lib.core.error import RemoteOperationError
from xq_lib.queues import queues


def test_queues_command_prints_panel():
    runner = CliRunner()
    mock_topology = MagicMock()

    with (
        patch("xq_lib.queues.cli.ScriptingSetup.gridEngine") as mock_setup_factory,
        patch("xq_lib.queues.cli.QueuesPresenter") as mock_presenter_cls,
        patch("xq_lib.queues.cli.Console"),
    ):
        mock_setup = MagicMock()
        mock_setup.buildTopology.return_value = mock_topology
        mock_setup.getAdaptorName.return_value = "gridengine"
        mock_setup_factory.return_value = mock_setup

        mock_presenter = MagicMock()
        mock_presenter_cls.return_value = mock_presenter

        result = runner.invoke(queues, [])

    assert result.exit_code == 0
    mock_setup.buildTopology.assert_called_once()
    mock_presenter_cls.assert_called_once_with(mock_topology, "gridengine")
    mock_presenter.createQueuesInfoPanel.assert_called_once()
    mock_presenter.dumpYaml.assert_not_called()


def test_queues_command_outputs_yaml_when_flag_set():
    runner = CliRunner()

    with (
        patch("xq_lib.queues.cli.ScriptingSetup.gridEngine") as mock_setup_factory,
        patch("xq_lib.queues.cli.QueuesPresenter") as mock_presenter_cls,
    ):
        mock_setup_factory.return_value = MagicMock()
        mock_presenter = MagicMock()
        mock_presenter_cls.return_value = mock_presenter

        result = runner.invoke(queues, ["--yaml"])

    assert result.exit_code == 0
    mock_presenter.dumpYaml.assert_called_once()
    mock_presenter.createQueuesInfoPanel.assert_not_called()


def test_queues_command_handles_xq_error():
    runner = CliRunner()

    with (
        patch("xq_lib.queues.cli.ScriptingSetup.gridEngine") as mock_setup_factory,
        patch("xq_lib.queues.cli.logger") as mock_logger,
    ):
        mock_setup = MagicMock()
        mock_setup.buildTopology.side_effect = RemoteOperationError("qconf failed")
        mock_setup_factory.return_value = mock_setup

        result = runner.invoke(queues, [])

    assert result.exit_code == CFG.exit_codes.default
    mock_logger.error.assert_called_once()


def test_queues_command_handles_unexpected_error():
    runner = CliRunner()

    with (
        patch("xq_lib.queues.cli.ScriptingSetup.gridEngine") as mock_setup_factory,
        patch("xq_lib.queues.cli.logger") as mock_logger,
    ):
        mock_setup_factory.side_effect = RuntimeError("boom")

        result = runner.invoke(queues, [])

    assert result.exit_code == CFG.exit_codes.unexpected_error
    mock_logger.critical.assert_called_once()
