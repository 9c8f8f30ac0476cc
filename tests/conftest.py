"""Shared pytest fixtures: credentials, fake transport and config isolation."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import Path

import pytest

from audioscrobbler.config.config import Config


class FakeTransport:
    """Transport stub returning canned bodies and recording each request."""

    def __init__(self, *bodies: str) -> None:
        self.bodies: list[str] = list(bodies)
        self.requests: list[tuple[str, dict[str, str]]] = []

    def send(self, url: str, params: Mapping[str, str]) -> str:
        self.requests.append((url, dict(params)))
        return self.bodies.pop(0)


@pytest.fixture(autouse=True)
def reset_config_cache(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep cached configs and credential env vars from leaking between tests."""

    for env_var in (
        "AUDIOSCROBBLER_CONFIG_PATH",
        "LASTFM_API_KEY",
        "LASTFM_API_SECRET",
        "LASTFM_USERNAME",
        "LASTFM_SESSION_KEY",
    ):
        monkeypatch.delenv(env_var, raising=False)
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def config() -> Config:
    return Config(api_key="key", shared_secret="secret", username="rj", session_key="sess")


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a config file whose log output stays inside ``tmp_path``."""

    path = tmp_path / "config.toml"
    _ = path.write_text(
        "\n".join(
            [
                'api_key = "key"',
                'shared_secret = "secret"',
                f'log_file = "{(tmp_path / "logs" / "test.log").as_posix()}"',
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path
