# Released under MIT License.
# Copyright (c) 2025 Ladislav Bartos and Robert Vacha Lab

from rich.console import Console, Group
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table
from rich.text import Text

from xq_lib.batch.topology import ResourceTopology
from xq_lib.core.common import get_panel_width
from xq_lib.core.config import CFG


class QueuesPresenter:
    """
    Presents the queues and parallel environments of a scheduler.
    """

    def __init__(self, topology: ResourceTopology, adaptor_name: str):
        """
        Initialize the presenter with a topology snapshot.

        Args:
            topology (ResourceTopology): Snapshot of the scheduler's resources.
            adaptor_name (str): Name of the adaptor shown in the title.
        """
        self._topology = topology
        self._adaptor_name = adaptor_name

    def dumpYaml(self) -> None:
        """
        Print the YAML representation of the topology to stdout.
        """
        print(self._topology.toYaml())

    def createQueuesInfoPanel(self, console: Console | None = None) -> Group:
        """
        Create a Rich panel displaying queues and parallel environments.

        Args:
            console (Console | None): Optional Rich Console instance.
                If None, a new Console will be created.

        Returns:
            Group: Rich Group containing the panel.
        """
        console = console or Console()

        content = Group(
            self._createQueuesTable(),
            Text(""),
            Rule(
                title=Text("PARALLEL ENVIRONMENTS", style=CFG.queues_presenter.title_style),
                style=CFG.queues_presenter.rule_style,
            ),
            Text(""),
            self._createEnvironmentsTable(),
        )

        panel = Panel(
            content,
            title=Text(
                f"QUEUES ({self._adaptor_name})",
                style=CFG.queues_presenter.title_style,
                justify="center",
            ),
            border_style=CFG.queues_presenter.border_style,
            padding=(1, 1),
            width=get_panel_width(
                console,
                1,
                CFG.queues_presenter.min_width,
                CFG.queues_presenter.max_width,
            ),
            expand=False,
        )

        return Group(Text(""), panel, Text(""))

    def _createQueuesTable(self) -> Table:
        """
        Construct a table of the queues in the order reported by the scheduler.
        """
        table = self._createTable("Name", "Slots")

        for name in self._topology.queue_names:
            queue = self._topology.getQueue(name)
            slots = str(queue.slots) if queue else "?"
            table.add_row(
                Text(name, style=CFG.queues_presenter.main_style),
                Text(slots, style=CFG.queues_presenter.main_style),
            )

        return table

    def _createEnvironmentsTable(self) -> Table:
        """
        Construct a table of the parallel environments and their allocation rules.
        """
        table = self._createTable("Name", "Allocation Rule")

        for pe in self._topology.parallel_environments.values():
            table.add_row(
                Text(pe.name, style=CFG.queues_presenter.main_style),
                Text(
                    pe.allocation_rule or "-",
                    style=CFG.queues_presenter.secondary_style,
                ),
            )

        return table

    @staticmethod
    def _createTable(*headers: str) -> Table:
        table = Table(show_header=True, box=None, padding=(0, 1))

        for header in headers:
            table.add_column(
                header=Text(
                    header, justify="center", style=CFG.queues_presenter.headers_style
                ),
                justify="left",
            )

        return table
