"""Help command implementation."""

from __future__ import annotations

import sys
from argparse import Namespace
from typing import IO, Optional

from examine.cli.commands import Command
from examine.cli.exit_codes import EXIT_SUCCESS

USAGE_TEMPLATE = """\
Examine CLI - Project Analysis Tool
Usage: {prog} analyze [PATH] [--format {{text,json,summary}}] [--config FILE]
       {prog} help

Options:
  --format FORMAT   Output format (default: text, or as set in config)
  --config FILE     Config file (default: .examine.yml in the project)
  --debug           Enable debug logging
  --verbose         Enable info-level logging
  --quiet           Only log errors
  --version         Show the examine version and exit

Examples:
  {prog} analyze .
  {prog} analyze /path/to/project
  {prog} analyze /path/to/project --format json
"""


def get_usage(prog: str = "examine") -> str:
    """Usage text for the given program name."""
    return USAGE_TEMPLATE.format(prog=prog)


def print_usage(prog: str = "examine", stream: Optional[IO[str]] = None) -> None:
    """Print usage to ``stream`` (stdout by default)."""
    print(get_usage(prog), end="", file=stream or sys.stdout)


class HelpCommand(Command):
    """Shows usage information."""

    def __init__(self, prog: str = "examine"):
        """Initialize HelpCommand.

        Args:
            prog: Program name shown in the usage lines.
        """
        self._prog = prog

    @property
    def name(self) -> str:
        """Command identifier."""
        return "help"

    def execute(self, args: Namespace) -> int:
        """Print usage to stdout.

        Returns:
            Exit code (always 0 for help).
        """
        print_usage(self._prog)
        return EXIT_SUCCESS
