"""CLI runner: argument parsing and command dispatch."""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from examine.cli.commands import AnalyzeCommand, Command, HelpCommand
from examine.cli.commands.help import print_usage
from examine.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from examine.core.logging import configure_logging, get_logger
from examine.reporters import list_available_reporters

LOGGER = get_logger(__name__)

PROG = "examine"

HELP_FLAGS = ("--help", "-h")


def get_version() -> str:
    try:
        return version("examine")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from examine import __version__

        return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="examine - detect a project's language, version status and framework.",
        add_help=False,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="store_true",
        help="Show examine version and exit.",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose (info-level) logging.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Reduce logging output to errors only.",
    )

    # Analyze options
    parser.add_argument(
        "--format",
        choices=list_available_reporters(),
        default=None,
        help="Output format (default: text, or as specified in config file).",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Path to config file (default: .examine.yml in the project).",
    )

    parser.add_argument("command", nargs="?", help="Command to run (analyze, help).")
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Project path to analyze (default: current directory).",
    )

    return parser


class CLIRunner:
    """Parses arguments and dispatches to a command."""

    def __init__(self) -> None:
        self._parser = build_parser()
        self._commands: Dict[str, Command] = {
            command.name: command for command in (AnalyzeCommand(), HelpCommand(PROG))
        }

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Run the CLI.

        Args:
            argv: Arguments without the program name; defaults to sys.argv[1:].

        Returns:
            Exit code.
        """
        argv_list: List[str] = list(sys.argv[1:] if argv is None else argv)

        if any(arg in HELP_FLAGS for arg in argv_list):
            return self._commands["help"].execute(argparse.Namespace())

        args, extras = self._parser.parse_known_args(argv_list)

        # Configure logging as early as possible.
        configure_logging(debug=args.debug, verbose=args.verbose, quiet=args.quiet)

        if extras:
            print(f"Unknown command: {' '.join(extras)}", file=sys.stderr)
            print_usage(PROG, sys.stderr)
            return EXIT_INVALID_USAGE

        if args.version:
            print(get_version())
            return EXIT_SUCCESS

        command = self._commands.get(args.command) if args.command else None
        if command is None:
            print(f"Unknown command: {args.command or '(none)'}", file=sys.stderr)
            print_usage(PROG, sys.stderr)
            return EXIT_INVALID_USAGE

        LOGGER.debug(f"Running command '{command.name}'")
        return command.execute(args)
