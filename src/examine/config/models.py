"""Configuration models for examine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from examine.core.models import FrameworkDetails

DEFAULT_OUTPUT_FORMAT = "text"


@dataclass
class OutputConfig:
    """Output settings."""

    format: str = DEFAULT_OUTPUT_FORMAT


@dataclass
class ExamineConfig:
    """Merged examine configuration."""

    output: OutputConfig = field(default_factory=OutputConfig)

    frameworks: Dict[str, FrameworkDetails] = field(default_factory=dict)
    """Extra framework metadata, overriding built-in entries by name."""

    _config_sources: List[str] = field(default_factory=list, repr=False)

    @property
    def sources(self) -> List[str]:
        """Where this configuration was loaded from, lowest precedence first."""
        return list(self._config_sources)
