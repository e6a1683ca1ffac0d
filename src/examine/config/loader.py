"""Layered configuration for examine.

Three layers are folded into one ``ExamineConfig``, later layers winning:
the user-wide file under ``$EXAMINE_HOME/config``, then the project file
(or the file named by ``--config``), then CLI flags. ``${VAR}`` and
``${VAR:-fallback}`` references in string values are resolved from the
environment while a file is read.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional, Tuple

import yaml

from examine.config.models import DEFAULT_OUTPUT_FORMAT, ExamineConfig, OutputConfig
from examine.config.paths import get_examine_home
from examine.config.validation import validate_config
from examine.core.logging import get_logger
from examine.core.models import FrameworkDetails

LOGGER = get_logger(__name__)

# Searched in this order; the first regular file wins.
PROJECT_CONFIG_NAMES = (".examine.yml", ".examine.yaml", "examine.yml", "examine.yaml")
GLOBAL_CONFIG_NAME = "config.yml"

ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")


class ConfigError(Exception):
    """A config file that was asked for could not be used."""


def load_config(
    project_root: Path,
    cli_config_path: Optional[Path] = None,
    cli_overrides: Optional[Dict[str, Any]] = None,
) -> ExamineConfig:
    """Fold every config layer that applies to ``project_root``.

    A broken global file only logs a warning. A broken project or
    ``--config`` file raises ``ConfigError``, as does a ``--config`` path
    that does not exist.
    """
    merged: Dict[str, Any] = {}
    sources: List[str] = []

    for label, path in _file_layers(project_root, cli_config_path):
        try:
            layer = _read_layer(path)
        except ConfigError as e:
            if label != "global":
                raise
            LOGGER.warning(f"Ignoring global config: {e}")
            continue
        validate_config(layer, source=str(path))
        merged = merge_configs(merged, layer)
        sources.append(f"{label}:{path}")
        LOGGER.debug(f"Applied {label} config {path}")

    if cli_overrides:
        merged = merge_configs(merged, cli_overrides)
        sources.append("cli")

    config = dict_to_config(merged)
    config._config_sources = sources
    LOGGER.debug(f"Effective config sources: {sources}")
    return config


def _file_layers(
    project_root: Path, cli_config_path: Optional[Path]
) -> Iterator[Tuple[str, Path]]:
    global_path = find_global_config()
    if global_path is not None:
        yield "global", global_path

    if cli_config_path is None:
        project_path = find_project_config(project_root)
        if project_path is not None:
            yield "project", project_path
    elif cli_config_path.exists():
        yield "custom", cli_config_path
    else:
        raise ConfigError(f"Config file not found: {cli_config_path}")


def _read_layer(path: Path) -> Dict[str, Any]:
    try:
        return load_yaml_file(path)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e


def find_project_config(project_root: Path) -> Optional[Path]:
    """First of ``PROJECT_CONFIG_NAMES`` present in ``project_root``."""
    candidates = (project_root / name for name in PROJECT_CONFIG_NAMES)
    return next((c for c in candidates if c.is_file()), None)


def find_global_config() -> Optional[Path]:
    path = get_examine_home() / "config" / GLOBAL_CONFIG_NAME
    return path if path.is_file() else None


def load_yaml_file(path: Path) -> Dict[str, Any]:
    """Parse one config document with environment references resolved.

    An empty document reads as ``{}``. Anything other than a mapping at
    the top level raises ``ConfigError``; YAML and I/O errors propagate.
    """
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must be a YAML mapping, got {type(data).__name__}")
    return expand_env_vars(data)


def expand_env_vars(data: Any) -> Any:
    """Resolve ``${VAR}`` references in every string nested in ``data``."""
    if isinstance(data, str):
        return ENV_VAR_PATTERN.sub(_lookup_env, data)
    if isinstance(data, list):
        return [expand_env_vars(item) for item in data]
    if isinstance(data, dict):
        return {key: expand_env_vars(value) for key, value in data.items()}
    return data


def _lookup_env(match: re.Match) -> str:
    name, fallback = match.group(1), match.group(2)
    if name in os.environ:
        return os.environ[name]
    if fallback is None:
        LOGGER.warning(f"Environment variable ${name} is not set and has no default")
        return ""
    return fallback


def merge_configs(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    """Return ``base`` updated by ``overlay``.

    Nested mappings merge key by key; lists and scalars from ``overlay``
    replace what ``base`` had. Neither argument is modified.
    """
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            value = merge_configs(current, value)
        merged[key] = value
    return merged


def dict_to_config(data: Dict[str, Any]) -> ExamineConfig:
    """Build the typed config, dropping entries validation already warned about."""
    output = data.get("output") if isinstance(data.get("output"), dict) else {}
    frameworks = data.get("frameworks") if isinstance(data.get("frameworks"), dict) else {}

    known: Dict[str, FrameworkDetails] = {}
    for name, entry in frameworks.items():
        details = _framework_entry_to_details(entry)
        if details is not None:
            known[str(name)] = details

    return ExamineConfig(
        output=OutputConfig(format=output.get("format") or DEFAULT_OUTPUT_FORMAT),
        frameworks=known,
    )


def _framework_entry_to_details(entry: Any) -> Optional[FrameworkDetails]:
    if not isinstance(entry, dict) or not isinstance(entry.get("type"), str):
        return None
    alternatives = entry.get("alternatives")
    description = entry.get("description")
    return FrameworkDetails(
        framework_type=entry["type"],
        alternatives=tuple(str(a) for a in alternatives) if isinstance(alternatives, list) else (),
        is_popular=entry.get("popular") is True,
        description=description if isinstance(description, str) else None,
    )
