# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

import io

import yaml
from rich.console import Console, Group
from rich.table import Table

from xq_lib.batch.topology import ParallelEnvironmentInfo, QueueInfo, ResourceTopology
from xq_lib.queues.presenter import QueuesPresenter


def _topology() -> ResourceTopology:
    return ResourceTopology.fromInfo(
        ["long.q", "all.q"],
        [QueueInfo("all.q", 8), QueueInfo("long.q", 16)],
        [
            ParallelEnvironmentInfo("mpi", "$fill_up"),
            ParallelEnvironmentInfo("broken", None),
        ],
    )


def _render(renderable) -> str:
    buf = io.StringIO()
    console = Console(file=buf, width=100, force_terminal=False)
    console.print(renderable)
    return buf.getvalue()


def test_create_queues_table_keeps_order():
    table = QueuesPresenter(_topology(), "gridengine")._createQueuesTable()

    assert isinstance(table, Table)
    assert table.row_count == 2

    output = _render(table)
    assert output.index("long.q") < output.index("all.q")
    assert "16" in output


def test_create_queues_table_unknown_queue():
    topology = ResourceTopology.fromInfo(["ghost.q"], [], [])
    output = _render(QueuesPresenter(topology, "gridengine")._createQueuesTable())

    assert "ghost.q" in output
    assert "?" in output


def test_create_environments_table():
    table = QueuesPresenter(_topology(), "gridengine")._createEnvironmentsTable()
    output = _render(table)

    assert table.row_count == 2
    assert "$fill_up" in output
    assert "broken" in output


def test_create_queues_info_panel():
    console = Console(file=io.StringIO(), width=100, force_terminal=False)
    group = QueuesPresenter(_topology(), "gridengine").createQueuesInfoPanel(console)

    assert isinstance(group, Group)
    output = _render(group)
    assert "QUEUES (gridengine)" in output
    assert "PARALLEL ENVIRONMENTS" in output
    assert "long.q" in output
    assert "mpi" in output


def test_dump_yaml(capsys):
    QueuesPresenter(_topology(), "gridengine").dumpYaml()
    data = yaml.safe_load(capsys.readouterr().out)

    assert [q["name"] for q in data["queues"]] == ["long.q", "all.q"]
    assert {pe["name"] for pe in data["parallel_environments"]} == {"mpi", "broken"}
