"""Summary reporter plugin: a single line per project."""

from __future__ import annotations

from typing import IO

from examine.core.models import ProjectInfo
from examine.reporters.base import ReporterPlugin


class SummaryReporter(ReporterPlugin):

    @property
    def name(self) -> str:
        return "summary"

    def report(self, info: ProjectInfo, output: IO[str]) -> None:
        output.write(f"{info.summary()}\n")
