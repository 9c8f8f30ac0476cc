"""Configuration management for the Last.fm client.

The config object is the single owner of the four credential values (API
key, shared secret, username, session key). It is passed by reference to the
client, and :meth:`Config.refresh` updates it in place so requests built after
an authorization step see the new session key.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar, Final

from audioscrobbler.config.file_ops import write_text_file
from audioscrobbler.config.paths import default_config_path
from audioscrobbler.errors import ConfigError
from audioscrobbler.platform.logging import logger

DEFAULT_API_URL: Final[str] = "https://ws.audioscrobbler.com/2.0/"
DEFAULT_AUTH_URL: Final[str] = "https://www.last.fm/api/auth/"

ENV_OVERRIDES: Final[dict[str, str]] = {
    "LASTFM_API_KEY": "api_key",
    "LASTFM_API_SECRET": "shared_secret",
    "LASTFM_USERNAME": "username",
    "LASTFM_SESSION_KEY": "session_key",
}


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects converted from strings in ``__post_init__``."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Credentials
    api_key: str | None = None
    shared_secret: str | None = None
    username: str | None = None
    session_key: str | None = None

    # Service endpoints
    api_url: str = DEFAULT_API_URL
    auth_url: str = DEFAULT_AUTH_URL

    # Raise instead of truncating when result selectors disagree on counts
    strict_records: bool = False

    # Log file path
    log_file: Path | None = _path_field()

    _source: Path | None = field(default=None, init=False, repr=False, compare=False)
    # File-backed values of fields currently overridden from the environment
    _file_values: dict[str, Any] = field(default_factory=dict, init=False, repr=False, compare=False)

    _instances: ClassVar[dict[Path, "Config"]] = {}

    def __post_init__(self) -> None:
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    @property
    def source(self) -> Path | None:
        """File this configuration was loaded from, if any."""
        return self._source

    @property
    def is_authorized(self) -> bool:
        return bool(self.session_key)

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls) if not f.name.startswith("_"))

    def refresh(self, **changes: Any) -> None:
        """Update fields in place.

        Raises:
            ConfigError: If a change names an unknown field.
        """
        known = set(self.field_names())
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration field(s): {', '.join(unknown)}")
        for name, value in changes.items():
            setattr(self, name, value)
            _ = self._file_values.pop(name, None)
        self.__post_init__()
        logger.debug("Configuration refreshed: %s", ", ".join(sorted(changes)))

    def save(self, path: Path | str | None = None) -> Path:
        """Save configuration to file.

        Args:
            path: Destination. Defaults to the file this config was loaded
                from, then to the default config path.

        Returns:
            Path: The file written.
        """
        if path is not None:
            target = Path(path).expanduser().resolve()
        elif self._source is not None:
            target = self._source
        else:
            target = default_config_path()

        try:
            write_text_file(target, self._render_toml(), private=True)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise ConfigError(f"Failed to save configuration to {target}: {e}") from e

        self._source = target
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = ["# Last.fm client configuration", ""]

        lines.append("# API account credentials from https://www.last.fm/api/account/create")
        self._append_value(lines, "api_key")
        self._append_value(lines, "shared_secret")
        lines.append("")

        lines.append("# Written by the authorization flow (`audioscrobbler auth`)")
        self._append_value(lines, "username")
        self._append_value(lines, "session_key")
        lines.append("")

        lines.append("# Service endpoints")
        self._append_value(lines, "api_url")
        self._append_value(lines, "auth_url")
        lines.append("")

        lines.append("# Raise an error when result fields match different node counts")
        self._append_value(lines, "strict_records")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/audioscrobbler.log"')
        self._append_value(lines, "log_file")
        lines.append("")

        return "\n".join(lines)

    def _append_value(self, lines: list[str], name: str) -> None:
        # Environment overrides are never persisted
        value = self._file_values[name] if name in self._file_values else getattr(self, name)
        if value is None:
            lines.append(f"# {name} = ")
            return
        lines.append(f"{name} = {self._format_toml_value(value)}")

    @staticmethod
    def _format_toml_value(value: Any) -> str:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(
        cls,
        path: Path | str | None = None,
        *,
        env: Mapping[str, str] | None = None,
    ) -> "Config":
        """Load configuration from file, creating a default one when missing.

        Args:
            path: Explicit config file. Falls back to
                ``AUDIOSCROBBLER_CONFIG_PATH`` and then the portable default.
            env: Environment mapping used for overrides (tests).

        Returns:
            Config: The cached instance for the resolved path.

        Raises:
            ConfigError: If the file cannot be parsed or holds unknown keys.
        """
        mapping = env if env is not None else os.environ
        config_file = default_config_path(path, mapping)

        cached = cls._instances.get(config_file)
        if cached is not None:
            return cached

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise ConfigError(f"Invalid configuration file {config_file}: {e}") from e

            unknown = sorted(set(config_dict) - set(cls.field_names()))
            if unknown:
                raise ConfigError(
                    f"Unknown configuration key(s) in {config_file}: {', '.join(unknown)}"
                )
            instance = cls(**config_dict)
            instance._source = config_file
            logger.info("Configuration loaded from %s", config_file)
        else:
            instance = cls()
            _ = instance.save(config_file)
            logger.info("Created default configuration at %s", config_file)

        for env_var, name in ENV_OVERRIDES.items():
            value = (mapping.get(env_var) or "").strip()
            if value:
                instance._file_values[name] = getattr(instance, name)
                setattr(instance, name, value)

        cls._instances[config_file] = instance
        return instance

    @classmethod
    def reset(cls) -> None:
        """Forget cached instances so the next ``load`` re-reads the file."""
        cls._instances.clear()


__all__ = ["Config", "DEFAULT_API_URL", "DEFAULT_AUTH_URL", "ENV_OVERRIDES"]
