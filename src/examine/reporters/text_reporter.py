"""Human-readable reporter plugin.

Prints one decorated line per field, followed by the summary line.
"""

from __future__ import annotations

from typing import IO, List

from examine.core.models import ProjectInfo
from examine.reporters.base import ReporterPlugin


class TextReporter(ReporterPlugin):
    """Console-friendly field listing."""

    @property
    def name(self) -> str:
        return "text"

    def report(self, info: ProjectInfo, output: IO[str]) -> None:
        output.write("\n".join(self._format_lines(info)) + "\n")

    def _format_lines(self, info: ProjectInfo) -> List[str]:
        lines = [f"📁 Project: {info.project_path}"]

        if info.project_name:
            lines.append(f"📦 Name: {info.project_name}")

        lines.append(f"🔤 Language: {info.language}")
        lines.append(f"📋 Version: {info.language_version or 'Unknown'}")
        lines.append(f"⚡ Status: {info.language_status}")

        if info.framework:
            lines.append(f"🚀 Framework: {info.framework}")
            if info.framework_version:
                lines.append(f"   Version: {info.framework_version}")
            details = info.framework_details
            if details:
                lines.append(f"   Type: {details.framework_type}")
                lines.append(f"   Popular: {'Yes' if details.is_popular else 'No'}")
                if details.description:
                    lines.append(f"   Description: {details.description}")
                if details.alternatives:
                    lines.append(f"   Alternatives: {', '.join(details.alternatives)}")
        else:
            lines.append("🚀 Framework: None detected")

        lines.append("")
        lines.append(f"✨ Summary: {info.summary()}")
        return lines
