"""JSON reporter plugin."""

from __future__ import annotations

import json
from typing import IO

from examine.core.models import ProjectInfo
from examine.reporters.base import ReporterPlugin


class JSONReporter(ReporterPlugin):
    """Writes ``ProjectInfo.to_dict()`` as indented JSON."""

    @property
    def name(self) -> str:
        return "json"

    def report(self, info: ProjectInfo, output: IO[str]) -> None:
        json.dump(info.to_dict(), output, indent=2, ensure_ascii=False)
        output.write("\n")
