"""Command line argument parser."""

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import final

from audioscrobbler.config.config import Config
from audioscrobbler.platform.logging import DEFAULT_LOG_FILE, setup_logger
from audioscrobbler.ui.cli.args.options import AuthArgs, CallArgs, CLIArgs, MethodsArgs


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="audioscrobbler",
            description="Call Last.fm 2.0 web service methods from the command line.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--config",
            type=str,
            metavar="PATH",
            help="Configuration file to use instead of the default location",
        )
        verbosity = parser.add_mutually_exclusive_group()
        _ = verbosity.add_argument(
            "--verbose",
            action="store_true",
            help="Show request progress and debug output",
        )
        _ = verbosity.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors and results",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        methods_parser = subparsers.add_parser(
            "methods",
            help="List the methods known to the client",
        )
        _ = methods_parser.add_argument(
            "--group",
            type=str,
            help="Only list methods of this group (e.g. artist)",
        )

        call_parser = subparsers.add_parser(
            "call",
            help="Invoke one method and print the resulting records",
        )
        _ = call_parser.add_argument(
            "method",
            type=str,
            metavar="METHOD",
            help="Method name in group.name form, e.g. artist.getInfo",
        )
        _ = call_parser.add_argument(
            "arguments",
            nargs="*",
            metavar="ARG",
            help="Required parameters, in declaration order",
        )
        _ = call_parser.add_argument(
            "--param",
            "-p",
            action="append",
            default=[],
            metavar="NAME=VALUE",
            help="Optional parameter override (repeatable)",
        )
        _ = call_parser.add_argument(
            "--raw",
            action="store_true",
            help="Print records as plain tuples instead of a table",
        )

        auth_parser = subparsers.add_parser(
            "auth",
            help="Authorize this application and store the session key",
        )
        _ = auth_parser.add_argument(
            "--no-browser",
            action="store_true",
            help="Print the authorization URL instead of opening a browser",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: On usage errors.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        if parsed_args.quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        config_path = Path(parsed_args.config) if parsed_args.config else None
        configuration = Config.load(config_path)
        _ = setup_logger(
            log_file=configuration.log_file or DEFAULT_LOG_FILE,
            console_level=log_level,
        )

        command: str = parsed_args.command
        if command == "methods":
            return MethodsArgs(command="methods", config_path=config_path, group=parsed_args.group)

        if command == "call":
            params = ArgumentParser._parse_params(parser, parsed_args.param)
            return CallArgs(
                command="call",
                config_path=config_path,
                method=parsed_args.method,
                arguments=list(parsed_args.arguments),
                params=params,
                raw=bool(parsed_args.raw),
            )

        return AuthArgs(
            command="auth",
            config_path=config_path,
            open_browser=not parsed_args.no_browser,
        )

    @staticmethod
    def _parse_params(parser: argparse.ArgumentParser, raw_params: list[str]) -> dict[str, str]:
        params: dict[str, str] = {}
        for item in raw_params:
            name, sep, value = item.partition("=")
            if not sep or not name.strip():
                parser.error(f"--param expects NAME=VALUE, got {item!r}")
            params[name.strip()] = value
        return params


__all__ = ["ArgumentParser"]
