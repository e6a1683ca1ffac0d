"""Tolerant readers for project manifest files.

Every reader returns None when the file is missing, unreadable or
malformed. Detectors treat a broken manifest exactly like an
absent one.
"""

from __future__ import annotations

import json
from pathlib import Path
from types import ModuleType
from typing import Any, Dict, Optional

import yaml

from examine.core.logging import get_logger

LOGGER = get_logger(__name__)


def get_tomllib() -> Optional[ModuleType]:
    """Return a TOML parser module (tomllib on 3.11+, tomli before).

    Returns:
        The parser module, or None if neither is installed.
    """
    try:
        import tomllib

        return tomllib
    except ImportError:
        pass
    try:
        import tomli

        return tomli
    except ImportError:
        return None


_tomllib = get_tomllib()


def read_text(path: Path) -> Optional[str]:
    """Read a text file, or None if it cannot be read."""
    if not path.is_file():
        return None
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        LOGGER.debug(f"Skipping unreadable file {path}: {e}")
        return None


def read_first_line(path: Path) -> Optional[str]:
    """Return the first non-blank line of a pin file, stripped.

    Used for ``.nvmrc``, ``.python-version`` and similar one-value files.
    """
    content = read_text(path)
    if content is None:
        return None
    for line in content.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            return line
    return None


def read_toml(path: Path) -> Optional[Dict[str, Any]]:
    """Parse a TOML file into a dict."""
    if _tomllib is None:
        LOGGER.debug(f"No TOML parser available, skipping {path}")
        return None
    if not path.is_file():
        return None
    try:
        with open(path, "rb") as f:
            return _tomllib.load(f)
    except (OSError, UnicodeDecodeError, _tomllib.TOMLDecodeError) as e:
        LOGGER.debug(f"Skipping malformed TOML {path}: {e}")
        return None


def read_json(path: Path) -> Optional[Dict[str, Any]]:
    """Parse a JSON object file into a dict."""
    content = read_text(path)
    if content is None:
        return None
    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        LOGGER.debug(f"Skipping malformed JSON {path}: {e}")
        return None
    if not isinstance(data, dict):
        LOGGER.debug(f"Skipping {path}: top-level value is not an object")
        return None
    return data


def read_yaml(path: Path) -> Optional[Dict[str, Any]]:
    """Parse a YAML mapping file into a dict."""
    content = read_text(path)
    if content is None:
        return None
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        LOGGER.debug(f"Skipping malformed YAML {path}: {e}")
        return None
    if not isinstance(data, dict):
        return None
    return data


def get_nested_str(data: Optional[Dict[str, Any]], *keys: str) -> Optional[str]:
    """Walk nested mappings and return a string leaf.

    Args:
        data: Parsed manifest (or None).
        *keys: Path of keys, e.g. ``"package", "name"``.

    Returns:
        The string value, or None if any step is missing or not the
        expected type.
    """
    current: Any = data
    for key in keys:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current if isinstance(current, str) else None
