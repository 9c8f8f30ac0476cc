"""Command execution package for CLI."""

from audioscrobbler.ui.cli.commands.auth import AuthCommand
from audioscrobbler.ui.cli.commands.call import CallCommand
from audioscrobbler.ui.cli.commands.methods import MethodsCommand

__all__ = ["AuthCommand", "CallCommand", "MethodsCommand"]
