"""Where: src/audioscrobbler/platform/logging/handlers.py
What: Rich console handler with dedicated rendering for API call events.
Why: Keep call progress readable while other records use Rich defaults.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, ClassVar

if sys.version_info >= (3, 12):
    from typing import override
else:
    from typing_extensions import override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class ApiEventRichHandler(RichHandler):
    """Render records carrying an ``api_event`` extra with icons and colors."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "api.call.start": ("📡", "blue"),
        "api.call.complete": ("✅", "green"),
        "api.call.error": ("❌", "red"),
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _render_api_event(self, record: logging.LogRecord) -> Text | None:
        event = getattr(record, "api_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        method = getattr(record, "method", None)
        _ = body.append(str(method) if method else "call")

        if event == "api.call.start":
            _ = body.append(" requested")
        elif event == "api.call.complete":
            count = getattr(record, "record_count", None)
            _ = body.append(" completed")
            if isinstance(count, int):
                _ = body.append(f" [records={count}]")
        else:
            _ = body.append(" failed")
            error_message = getattr(record, "error_message", None)
            if error_message:
                _ = body.append(f" ({error_message})")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        api_text = self._render_api_event(record)
        if api_text is not None:
            return api_text
        return super().render_message(record, message)


__all__ = ["ApiEventRichHandler"]
