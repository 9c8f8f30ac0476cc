"""Where: src/audioscrobbler/platform/lastfm/user_agent.py
What: Build the User-Agent string sent with every request.
Why: Last.fm asks API clients to identify themselves.
"""

from __future__ import annotations

from typing import Final

from audioscrobbler import __version__

APP_NAME: Final[str] = "audioscrobbler"


def format_user_agent(app_name: str, app_version: str, contact: str = "") -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


DEFAULT_USER_AGENT: Final[str] = format_user_agent(APP_NAME, __version__)


__all__ = ["APP_NAME", "DEFAULT_USER_AGENT", "format_user_agent"]
