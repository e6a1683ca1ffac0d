"""Project name detection.

Reads the name declared in the language's manifest and falls back to the
directory name when there is none.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Callable, Dict, Optional

from examine.core.logging import get_logger
from examine.core.models import Language
from examine.detection.manifests import (
    get_nested_str,
    read_json,
    read_text,
    read_toml,
    read_yaml,
)

LOGGER = get_logger(__name__)

NameReader = Callable[[Path], Optional[str]]

_GO_MODULE = re.compile(r"^module\s+(\S+)", re.MULTILINE)


def _clean(name: Optional[str]) -> Optional[str]:
    if name is None:
        return None
    name = name.strip()
    return name or None


def detect_rust_name(project_root: Path) -> Optional[str]:
    return _clean(get_nested_str(read_toml(project_root / "Cargo.toml"), "package", "name"))


def detect_javascript_name(project_root: Path) -> Optional[str]:
    return _clean(get_nested_str(read_json(project_root / "package.json"), "name"))


def detect_go_name(project_root: Path) -> Optional[str]:
    """Last path segment of the go.mod module path."""
    content = read_text(project_root / "go.mod")
    if content is None:
        return None
    match = _GO_MODULE.search(content)
    if not match:
        return None
    return _clean(match.group(1).strip("\"").rstrip("/").split("/")[-1])


def detect_python_name(project_root: Path) -> Optional[str]:
    """PEP 621 [project].name, then [tool.poetry].name."""
    pyproject = read_toml(project_root / "pyproject.toml")
    return _clean(get_nested_str(pyproject, "project", "name")) or _clean(
        get_nested_str(pyproject, "tool", "poetry", "name")
    )


def detect_java_name(project_root: Path) -> Optional[str]:
    """Top-level artifactId of pom.xml."""
    content = read_text(project_root / "pom.xml")
    if content is None:
        return None
    # Drop parent, dependency and plugin blocks so their artifactIds don't match
    content = re.sub(
        r"<(parent|dependencies|dependencyManagement|build|profiles)>.*?</\1>",
        "",
        content,
        flags=re.DOTALL,
    )
    match = re.search(r"<artifactId>\s*([^<\s]+)\s*</artifactId>", content)
    return match.group(1) if match else None


def detect_php_name(project_root: Path) -> Optional[str]:
    """Package part of composer.json ``vendor/package``."""
    name = _clean(get_nested_str(read_json(project_root / "composer.json"), "name"))
    if name is None:
        return None
    return name.split("/")[-1] or None


def detect_dart_name(project_root: Path) -> Optional[str]:
    return _clean(get_nested_str(read_yaml(project_root / "pubspec.yaml"), "name"))


# Every language has an entry; None means only the directory fallback applies.
NAME_READERS: Dict[Language, Optional[NameReader]] = {
    Language.RUST: detect_rust_name,
    Language.JAVASCRIPT: detect_javascript_name,
    Language.GO: detect_go_name,
    Language.PYTHON: detect_python_name,
    Language.JAVA: detect_java_name,
    Language.PHP: detect_php_name,
    Language.RUBY: None,
    Language.SWIFT: None,
    Language.DART: detect_dart_name,
    Language.ELIXIR: None,
    Language.HASKELL: None,
    Language.CLOJURE: None,
    Language.CPP: None,
    Language.CSHARP: None,
}


def fallback_name(path: Path) -> Optional[str]:
    """Final segment of the absolute path, None for a filesystem root.

    Symlinks are not followed, so a linked checkout keeps its own name.
    """
    return Path(os.path.abspath(path)).name or None


def detect_project_name(path: Path, language: Language) -> Optional[str]:
    """Detect the project name.

    Args:
        path: Path being analyzed.
        language: Detected primary language.

    Returns:
        Declared name, else the directory name.
    """
    reader = NAME_READERS[language]
    name = reader(path) if reader is not None else None
    if name:
        LOGGER.debug(f"Project name from manifest: {name}")
        return name
    return fallback_name(path)
