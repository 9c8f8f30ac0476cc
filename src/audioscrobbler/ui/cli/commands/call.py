"""Where: src/audioscrobbler/ui/cli/commands/call.py
What: Invoke one generated binding and print its records.
Why: Exercise any registered method without writing Python.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from audioscrobbler.api.registry import MethodDescriptor
from audioscrobbler.api.response_parser import Record, label_records
from audioscrobbler.client import LastFMClient
from audioscrobbler.ui.cli.args.options import CallArgs


@final
class CallCommand:
    """Call ``args.method`` with positional arguments and ``--param`` overrides."""

    def __init__(
        self,
        args: CallArgs,
        client_factory: Callable[[], LastFMClient],
        *,
        console: Console | None = None,
    ) -> None:
        self._args = args
        self._client_factory = client_factory
        self._console = console or Console()

    def execute(self) -> int:
        client = self._client_factory()
        if self._args.method not in client.registry:
            self._console.print(f"[red]Unknown method '{escape(self._args.method)}'.[/red]")
            return 2

        binding = client.binding(self._args.method)
        records = binding(*self._args.arguments, **self._args.params)

        if not records:
            self._console.print("[yellow]No records returned.[/yellow]")
            return 0

        if self._args.raw:
            for record in records:
                self._console.print(record, highlight=False, markup=False)
            return 0

        self._console.print(self._build_table(binding.descriptor, records))
        return 0

    @staticmethod
    def _build_table(descriptor: MethodDescriptor, records: Sequence[Record]) -> Table:
        labeled = label_records(records, descriptor)
        table = Table(
            title=descriptor.wire_name,
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        columns = list(labeled[0]) if labeled else []
        for column in columns:
            table.add_column(column)
        for row in labeled:
            table.add_row(*(escape(row.get(column, "")) for column in columns))
        return table
