"""Base class for reporter plugins."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import IO

from examine.core.models import ProjectInfo


class ReporterPlugin(ABC):
    """Renders a ProjectInfo to a text stream."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Reporter identifier used by ``--format``."""

    @abstractmethod
    def report(self, info: ProjectInfo, output: IO[str]) -> None:
        """Write the rendered result.

        Args:
            info: Detection result.
            output: Stream to write to.
        """
