"""Tests for help command."""

from __future__ import annotations

import io
from argparse import Namespace

from examine.cli.commands.help import HelpCommand, get_usage, print_usage
from examine.cli.exit_codes import EXIT_SUCCESS


class TestHelpCommand:
    """Tests for HelpCommand."""

    def test_command_name(self) -> None:
        """Test command name property."""
        assert HelpCommand().name == "help"

    def test_execute_prints_usage(self, capsys) -> None:
        """Test execute prints usage to stdout and succeeds."""
        result = HelpCommand("examine").execute(Namespace())

        captured = capsys.readouterr()
        assert result == EXIT_SUCCESS
        assert "Examine CLI - Project Analysis Tool" in captured.out
        assert "examine analyze /path/to/project --format json" in captured.out
        assert captured.err == ""


class TestUsage:
    """Tests for usage helpers."""

    def test_program_name_substituted(self) -> None:
        usage = get_usage("proj-check")
        assert "Usage: proj-check analyze [PATH]" in usage
        assert "{prog}" not in usage
        assert "{text,json,summary}" in usage

    def test_print_usage_to_stream(self) -> None:
        stream = io.StringIO()
        print_usage("examine", stream)
        assert stream.getvalue() == get_usage("examine")
