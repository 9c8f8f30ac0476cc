"""Command line argument handling package."""

from audioscrobbler.ui.cli.args.options import AuthArgs, CallArgs, CLIArgs, MethodsArgs
from audioscrobbler.ui.cli.args.parser import ArgumentParser

__all__ = ["ArgumentParser", "AuthArgs", "CLIArgs", "CallArgs", "MethodsArgs"]
