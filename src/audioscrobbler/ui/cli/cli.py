"""Command line interface for the Last.fm client."""

import sys
from typing import final

from audioscrobbler.client import LastFMClient
from audioscrobbler.config.config import Config
from audioscrobbler.errors import AudioscrobblerError
from audioscrobbler.platform.logging import logger
from audioscrobbler.ui.cli.args import ArgumentParser
from audioscrobbler.ui.cli.args.options import AuthArgs, CallArgs, CLIArgs
from audioscrobbler.ui.cli.commands import AuthCommand, CallCommand, MethodsCommand


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Process exit code.
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            def client_factory() -> LastFMClient:
                return LastFMClient(Config.load(args.config_path))

            if isinstance(args, CallArgs):
                return CallCommand(args, client_factory).execute()
            if isinstance(args, AuthArgs):
                return AuthCommand(args, client_factory).execute()
            return MethodsCommand(args).execute()

        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            return 130
        except AudioscrobblerError as e:
            logger.error("%s: %s", type(e).__name__, e)
            return 1


def main() -> int:
    """Main entry point."""
    return CommandProcessor.process_command()


if __name__ == "__main__":
    sys.exit(main())
