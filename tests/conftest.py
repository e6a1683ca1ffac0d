"""Shared fixtures for examine tests."""

from __future__ import annotations

import logging
from pathlib import Path
from types import SimpleNamespace
from typing import IO, Callable, Dict, Type

import pytest

import examine.reporters
from examine.core.models import ProjectInfo
from examine.reporters.base import ReporterPlugin

ProjectFactory = Callable[[Dict[str, str]], Path]


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Create a project directory from a mapping of relative path to content.

    Each call creates a fresh directory under ``tmp_path`` named ``project``,
    ``project1``, ``project2``...
    """
    counter = {"n": 0}

    def _make(files: Dict[str, str], name: str = "") -> Path:
        if not name:
            name = "project" if counter["n"] == 0 else f"project{counter['n']}"
        counter["n"] += 1
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel_path, content in files.items():
            target = root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8")
        return root

    return _make


@pytest.fixture(autouse=True)
def isolated_examine_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point EXAMINE_HOME at an empty directory so a user's global config never leaks in."""
    home = tmp_path_factory.mktemp("examine_home")
    monkeypatch.setenv("EXAMINE_HOME", str(home))
    return home


@pytest.fixture(autouse=True)
def reset_examine_logging():
    """Drop handlers installed by configure_logging so they don't outlive a captured stream."""
    yield
    logger = logging.getLogger("examine")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


class YAMLReporter(ReporterPlugin):
    """Stand-in for a reporter shipped by another distribution."""

    @property
    def name(self) -> str:
        return "yaml"

    def report(self, info: ProjectInfo, output: IO[str]) -> None:
        output.write(f"language: {info.language}\n")


@pytest.fixture
def yaml_reporter_installed(monkeypatch: pytest.MonkeyPatch) -> Type[ReporterPlugin]:
    """Expose YAMLReporter through the examine.reporters entry-point group."""
    monkeypatch.setattr(
        examine.reporters,
        "_iter_entry_points",
        lambda group: [SimpleNamespace(name="yaml", load=lambda: YAMLReporter)],
    )
    return YAMLReporter
