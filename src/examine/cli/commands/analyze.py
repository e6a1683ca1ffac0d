"""Analyze command implementation."""

from __future__ import annotations

import sys
from argparse import Namespace
from pathlib import Path
from typing import Any, Dict

from examine.cli.commands import Command
from examine.cli.exit_codes import (
    EXIT_CONFIG_ERROR,
    EXIT_DETECTION_FAILED,
    EXIT_INVALID_USAGE,
    EXIT_SUCCESS,
)
from examine.config import ConfigError, ExamineConfig, load_config
from examine.core.errors import DetectionError, PathNotFoundError
from examine.core.logging import get_logger
from examine.detection import ProjectDetector
from examine.knowledge.frameworks import FrameworkKnowledgeBase
from examine.reporters import get_reporter_plugin

LOGGER = get_logger(__name__)


def _error(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)


class AnalyzeCommand(Command):
    """Detects a project's language, version and framework and renders it."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "analyze"

    def execute(self, args: Namespace) -> int:
        """Execute the analyze command.

        Args:
            args: Parsed command-line arguments (path, format, config).

        Returns:
            Exit code.
        """
        path = getattr(args, "path", None) or "."
        project_root = Path(path)
        # A missing path is a detection failure, whatever config sits beside it
        if not project_root.exists():
            _error(str(PathNotFoundError(path)))
            return EXIT_DETECTION_FAILED
        config_root = project_root if project_root.is_dir() else project_root.parent

        try:
            config = load_config(
                project_root=config_root,
                cli_config_path=getattr(args, "config", None),
                cli_overrides=self._cli_overrides(args),
            )
        except ConfigError as e:
            _error(str(e))
            return EXIT_CONFIG_ERROR

        reporter = get_reporter_plugin(config.output.format)
        if reporter is None:
            _error(f"Unknown output format '{config.output.format}'")
            return EXIT_INVALID_USAGE

        try:
            info = self._detector(config).detect(path)
        except DetectionError as e:
            LOGGER.debug(f"Detection failed for {path}: {e}")
            _error(str(e))
            return EXIT_DETECTION_FAILED

        reporter.report(info, sys.stdout)
        return EXIT_SUCCESS

    def _cli_overrides(self, args: Namespace) -> Dict[str, Any]:
        overrides: Dict[str, Any] = {}
        fmt = getattr(args, "format", None)
        if fmt:
            overrides["output"] = {"format": fmt}
        return overrides

    def _detector(self, config: ExamineConfig) -> ProjectDetector:
        return ProjectDetector(FrameworkKnowledgeBase(config.frameworks))
