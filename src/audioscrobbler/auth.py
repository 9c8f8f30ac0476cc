"""Where: src/audioscrobbler/auth.py
What: Desktop authorization flow that obtains and stores a session key.
Why: Methods with required auth need ``sk``; it is granted out of band by the user.
"""

from __future__ import annotations

import webbrowser
from collections.abc import Callable
from urllib.parse import urlencode

from audioscrobbler.client import LastFMClient
from audioscrobbler.config.config import Config
from audioscrobbler.errors import ConfigError
from audioscrobbler.platform.logging import logger


def build_auth_url(config: Config, token: str) -> str:
    """Return the page where the user grants access for ``token``."""

    if not config.api_key:
        raise ConfigError("An API key must be configured before authorizing")
    return f"{config.auth_url}?{urlencode({'api_key': config.api_key, 'token': token})}"


def _default_confirm(url: str) -> None:
    _ = input(f"Grant access at {url} then press Enter to continue... ")


def authorize(
    client: LastFMClient,
    *,
    open_url: Callable[[str], object] = webbrowser.open,
    confirm: Callable[[str], object] = _default_confirm,
    save: bool = True,
) -> str:
    """Run the token/session exchange and store the session in ``client.config``.

    Args:
        client: Client whose config receives the username and session key.
        open_url: Opens the authorization page (a browser by default).
        confirm: Blocks until the user has granted access.
        save: Persist the refreshed configuration.

    Returns:
        str: The new session key.

    Raises:
        ConfigError: If the service returned no token or no session.
    """

    tokens = client.auth.getToken()
    if not tokens:
        raise ConfigError("auth.getToken returned no token")
    token = str(tokens[0])

    url = build_auth_url(client.config, token)
    logger.info("Opening %s to authorize this application", url)
    _ = open_url(url)
    _ = confirm(url)

    sessions = client.auth.getSession(token)
    if not sessions:
        raise ConfigError("auth.getSession returned no session")
    username, session_key = sessions[0]
    if not session_key:
        raise ConfigError("auth.getSession returned an empty session key")

    client.config.refresh(username=username or None, session_key=session_key)
    if save:
        _ = client.config.save()
    logger.info("Authorized as %s", username or "<unknown user>")
    return session_key


__all__ = ["authorize", "build_auth_url"]
