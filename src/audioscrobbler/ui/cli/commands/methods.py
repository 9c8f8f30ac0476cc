"""Where: src/audioscrobbler/ui/cli/commands/methods.py
What: List registered methods in a Rich table.
Why: Let users discover method names, parameters and result fields.
"""

from __future__ import annotations

from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from audioscrobbler.api.methods import DEFAULT_REGISTRY
from audioscrobbler.api.registry import AuthMode, MethodDescriptor, MethodRegistry
from audioscrobbler.api.selectors import field_key
from audioscrobbler.ui.cli.args.options import MethodsArgs

_AUTH_STYLES: dict[AuthMode, str] = {
    AuthMode.NONE: "dim",
    AuthMode.REQUIRED: "yellow",
    AuthMode.SESSION_BOOTSTRAP: "cyan",
}


@final
class MethodsCommand:
    """Render the method registry."""

    def __init__(
        self,
        args: MethodsArgs,
        *,
        registry: MethodRegistry = DEFAULT_REGISTRY,
        console: Console | None = None,
    ) -> None:
        self._args = args
        self._registry = registry
        self._console = console or Console()

    def execute(self) -> int:
        descriptors = [
            descriptor
            for descriptor in self._registry.all_methods()
            if self._args.group is None or descriptor.group == self._args.group
        ]
        if not descriptors:
            self._console.print(f"[yellow]No methods in group '{self._args.group}'.[/yellow]")
            return 1

        self._console.print(self._build_table(descriptors))
        return 0

    @staticmethod
    def _build_table(descriptors: list[MethodDescriptor]) -> Table:
        table = Table(
            title="Last.fm Methods",
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("Method", style="bold")
        table.add_column("Auth")
        table.add_column("Required")
        table.add_column("Optional", style="dim")
        table.add_column("Fields")

        for descriptor in descriptors:
            table.add_row(
                descriptor.wire_name,
                Text(descriptor.auth.value, style=_AUTH_STYLES[descriptor.auth]),
                ", ".join(descriptor.required),
                ", ".join(descriptor.optional_names),
                ", ".join(field_key(selector) for selector in descriptor.selectors),
            )
        return table
