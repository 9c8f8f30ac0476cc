"""Table-driven client for the Last.fm (Audioscrobbler) 2.0 web service."""

__version__ = "0.1.0"

from audioscrobbler.client import LastFMClient  # noqa: E402
from audioscrobbler.config.config import Config  # noqa: E402
from audioscrobbler.errors import (  # noqa: E402
    ArityError,
    AudioscrobblerError,
    ConfigError,
    MalformedResponseError,
    ServiceError,
    TransportError,
)

__all__ = [
    "ArityError",
    "AudioscrobblerError",
    "Config",
    "ConfigError",
    "LastFMClient",
    "MalformedResponseError",
    "ServiceError",
    "TransportError",
    "__version__",
]
