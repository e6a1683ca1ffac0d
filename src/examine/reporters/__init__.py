"""Reporter plugins for examine output formatting.

Built-in reporters are always available; additional ones are discovered
via Python entry points (examine.reporters group).
"""

from __future__ import annotations

from importlib.metadata import entry_points
from typing import Dict, List, Optional, Type

from examine.core.logging import get_logger
from examine.reporters.base import ReporterPlugin
from examine.reporters.json_reporter import JSONReporter
from examine.reporters.summary_reporter import SummaryReporter
from examine.reporters.text_reporter import TextReporter

LOGGER = get_logger(__name__)

REPORTER_ENTRY_POINT_GROUP = "examine.reporters"

BUILTIN_REPORTERS: Dict[str, Type[ReporterPlugin]] = {
    "text": TextReporter,
    "json": JSONReporter,
    "summary": SummaryReporter,
}


def _iter_entry_points(group: str):
    eps = entry_points()
    if hasattr(eps, "select"):
        return eps.select(group=group)
    return eps.get(group, [])


def discover_reporter_plugins() -> Dict[str, Type[ReporterPlugin]]:
    """Discover all reporter plugins, built-in ones first."""
    plugins: Dict[str, Type[ReporterPlugin]] = dict(BUILTIN_REPORTERS)
    for ep in _iter_entry_points(REPORTER_ENTRY_POINT_GROUP):
        if ep.name in plugins:
            continue
        try:
            plugin_class = ep.load()
        except Exception as e:
            LOGGER.warning(f"Failed to load reporter plugin '{ep.name}': {e}")
            continue
        if isinstance(plugin_class, type) and issubclass(plugin_class, ReporterPlugin):
            plugins[ep.name] = plugin_class
        else:
            LOGGER.warning(f"Reporter plugin '{ep.name}' is not a ReporterPlugin subclass")
    return plugins


def get_reporter_plugin(name: str) -> Optional[ReporterPlugin]:
    """Get an instantiated reporter plugin by name."""
    plugin_class = discover_reporter_plugins().get(name)
    return plugin_class() if plugin_class else None


def list_available_reporters() -> List[str]:
    """List names of all available reporter plugins."""
    return sorted(discover_reporter_plugins())


__all__ = [
    "ReporterPlugin",
    "JSONReporter",
    "TextReporter",
    "SummaryReporter",
    "discover_reporter_plugins",
    "get_reporter_plugin",
    "list_available_reporters",
]
