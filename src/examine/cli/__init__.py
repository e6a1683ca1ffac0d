"""Command-line interface for examine."""

from __future__ import annotations

from typing import Iterable, Optional

from examine.cli.runner import CLIRunner


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use as a console script.
    """
    runner = CLIRunner()
    return runner.run(argv)


__all__ = ["CLIRunner", "main"]
