"""Where: src/audioscrobbler/errors.py
What: Exception hierarchy shared by every layer of the client.
Why: Let callers tell transport failures apart from service-level errors.
"""

from __future__ import annotations


class AudioscrobblerError(Exception):
    """Base exception for all client errors."""


class ConfigError(AudioscrobblerError):
    """Raised when credentials or configuration values are missing or invalid."""


class ArityError(AudioscrobblerError, TypeError):
    """Raised when a generated binding receives the wrong arguments."""


class TransportError(AudioscrobblerError):
    """Raised when the HTTP exchange itself fails.

    Attributes:
        status: HTTP status code, or ``None`` when no response was received.
        body: Response body text when one was received.
    """

    def __init__(self, message: str, *, status: int | None = None, body: str | None = None) -> None:
        super().__init__(message)
        self.status: int | None = status
        self.body: str | None = body


class ServiceError(AudioscrobblerError):
    """Raised when the response carries an ``<error>`` node.

    The exception message is the node text, verbatim.
    """

    def __init__(self, message: str, *, code: int | None = None) -> None:
        super().__init__(message)
        self.message: str = message
        self.code: int | None = code


class MalformedResponseError(AudioscrobblerError):
    """Raised when a response cannot be parsed or shaped into records."""


__all__ = [
    "ArityError",
    "AudioscrobblerError",
    "ConfigError",
    "MalformedResponseError",
    "ServiceError",
    "TransportError",
]
