"""Where: src/audioscrobbler/ui/cli/commands/auth.py
What: Run the authorization flow from the terminal.
Why: Obtain the session key needed by write methods such as track.scrobble.
"""

from __future__ import annotations

import webbrowser
from collections.abc import Callable
from typing import final

from rich.console import Console

from audioscrobbler.auth import authorize
from audioscrobbler.client import LastFMClient
from audioscrobbler.ui.cli.args.options import AuthArgs


@final
class AuthCommand:
    """Authorize the configured API account and persist the session key."""

    def __init__(
        self,
        args: AuthArgs,
        client_factory: Callable[[], LastFMClient],
        *,
        console: Console | None = None,
        confirm: Callable[[str], object] | None = None,
    ) -> None:
        self._args = args
        self._client_factory = client_factory
        self._console = console or Console()
        self._confirm = confirm or self._prompt

    def execute(self) -> int:
        client = self._client_factory()
        open_url = webbrowser.open if self._args.open_browser else self._show_url
        _ = authorize(client, open_url=open_url, confirm=self._confirm)
        username = client.config.username or "<unknown user>"
        self._console.print(f"[green]Authorized as {username}.[/green]")
        return 0

    def _show_url(self, url: str) -> None:
        self._console.print(f"Open this URL to grant access:\n[bold]{url}[/bold]")

    def _prompt(self, _url: str) -> None:
        _ = self._console.input("Press Enter once access has been granted... ")
