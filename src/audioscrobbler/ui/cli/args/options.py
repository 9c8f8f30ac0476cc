"""Command line argument options."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, final


@final
@dataclass(slots=True)
class MethodsArgs:
    """Command line arguments for the ``methods`` subcommand."""

    command: Literal["methods"]
    config_path: Path | None
    group: str | None


@final
@dataclass(slots=True)
class CallArgs:
    """Command line arguments for the ``call`` subcommand."""

    command: Literal["call"]
    config_path: Path | None
    method: str
    arguments: list[str] = field(default_factory=list)
    params: dict[str, str] = field(default_factory=dict)
    raw: bool = False


@final
@dataclass(slots=True)
class AuthArgs:
    """Command line arguments for the ``auth`` subcommand."""

    command: Literal["auth"]
    config_path: Path | None
    open_browser: bool = True


CLIArgs = MethodsArgs | CallArgs | AuthArgs

__all__ = ["AuthArgs", "CLIArgs", "CallArgs", "MethodsArgs"]
