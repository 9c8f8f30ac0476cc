"""Where: src/audioscrobbler/platform/lastfm/http_client.py
What: Synchronous HTTP transport POSTing parameter sets to the web service.
Why: Keep network concerns out of request building and response shaping.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol

import requests

from audioscrobbler.errors import TransportError
from audioscrobbler.platform.logging import logger

from .user_agent import DEFAULT_USER_AGENT


class Transport(Protocol):
    """Anything able to POST a parameter set and return the body text."""

    def send(self, url: str, params: Mapping[str, str]) -> str:
        ...


class RequestsTransport:
    """POST form-encoded parameters with ``requests``.

    Network failures and non-2xx statuses raise :class:`TransportError`.
    Nothing is retried.
    """

    def __init__(
        self,
        *,
        timeout: tuple[float, float] = (5.0, 30.0),
        user_agent: str = DEFAULT_USER_AGENT,
        session: requests.Session | None = None,
    ) -> None:
        self._timeout: tuple[float, float] = timeout
        self._headers: dict[str, str] = {"User-Agent": user_agent}
        self._session: requests.Session | None = session

    def send(self, url: str, params: Mapping[str, str]) -> str:
        post = self._session.post if self._session is not None else requests.post
        try:
            response = post(url, data=dict(params), headers=self._headers, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.debug("HTTP request to %s failed: %s", url, exc)
            raise TransportError(f"Request to {url} failed: {exc}") from exc

        status = int(response.status_code)
        if "charset" not in response.headers.get("Content-Type", "").lower():
            # Undeclared charset: XML defaults to UTF-8
            response.encoding = "utf-8"
        body = response.text
        if not 200 <= status < 300:
            raise TransportError(f"HTTP error: status={status}", status=status, body=body)
        return body


__all__ = ["RequestsTransport", "Transport"]
