"""Language version detection.

Each reader checks well-known toolchain pin files and manifest fields in a
fixed order and returns the first raw version string it finds. No
validation happens here; the lifecycle tables deal with odd values.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Callable, Dict, Optional

from examine.core.logging import get_logger
from examine.core.models import Language
from examine.detection.manifests import (
    get_nested_str,
    read_first_line,
    read_json,
    read_text,
    read_toml,
)

LOGGER = get_logger(__name__)

VersionReader = Callable[[Path], Optional[str]]

_GO_DIRECTIVE = re.compile(r"^go\s+(\S+)", re.MULTILINE)

# Maven properties that pin the Java language level, in precedence order
_MAVEN_VERSION_PROPERTIES = (
    "maven.compiler.release",
    "maven.compiler.source",
    "java.version",
)

_GRADLE_VERSION_PATTERNS = (
    re.compile(r"languageVersion\s*(?:=|\.set\()\s*JavaLanguageVersion\.of\(\s*(\d+)\s*\)"),
    re.compile(r"sourceCompatibility\s*=?\s*JavaVersion\.VERSION_(\d+(?:_\d+)?)"),
    re.compile(r"sourceCompatibility\s*=?\s*['\"]?(\d+(?:\.\d+)?)['\"]?"),
)


def _non_empty(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def detect_rust_version(project_root: Path) -> Optional[str]:
    """Cargo.toml rust-version, then rust-toolchain.toml, then rust-toolchain."""
    cargo = read_toml(project_root / "Cargo.toml")
    version = _non_empty(get_nested_str(cargo, "package", "rust-version"))
    if version:
        return version

    toolchain = read_toml(project_root / "rust-toolchain.toml")
    version = _non_empty(get_nested_str(toolchain, "toolchain", "channel"))
    if version:
        return version

    return read_first_line(project_root / "rust-toolchain")


def detect_node_version(project_root: Path) -> Optional[str]:
    """.nvmrc, then package.json engines.node."""
    version = read_first_line(project_root / ".nvmrc")
    if version:
        return version

    package_json = read_json(project_root / "package.json")
    return _non_empty(get_nested_str(package_json, "engines", "node"))


def detect_go_version(project_root: Path) -> Optional[str]:
    """The ``go`` directive of go.mod."""
    content = read_text(project_root / "go.mod")
    if content is None:
        return None
    match = _GO_DIRECTIVE.search(content)
    return match.group(1) if match else None


def detect_python_version(project_root: Path) -> Optional[str]:
    """.python-version, then requires-python, then Poetry's python constraint."""
    version = read_first_line(project_root / ".python-version")
    if version:
        return version

    pyproject = read_toml(project_root / "pyproject.toml")
    version = _non_empty(get_nested_str(pyproject, "project", "requires-python"))
    if version:
        return version

    return _non_empty(get_nested_str(pyproject, "tool", "poetry", "dependencies", "python"))


def detect_java_version(project_root: Path) -> Optional[str]:
    """.java-version, then pom.xml compiler properties, then Gradle settings."""
    version = read_first_line(project_root / ".java-version")
    if version:
        return version

    pom = read_text(project_root / "pom.xml")
    if pom:
        for prop in _MAVEN_VERSION_PROPERTIES:
            tag = re.escape(prop)
            match = re.search(rf"<{tag}>\s*([^<\s]+)\s*</{tag}>", pom)
            if match and not match.group(1).startswith("$"):
                return match.group(1)

    for gradle_file in ("build.gradle", "build.gradle.kts"):
        gradle = read_text(project_root / gradle_file)
        if not gradle:
            continue
        for pattern in _GRADLE_VERSION_PATTERNS:
            match = pattern.search(gradle)
            if match:
                # VERSION_1_8 -> 1.8
                return match.group(1).replace("_", ".")

    return None


def detect_ruby_version(project_root: Path) -> Optional[str]:
    """.ruby-version."""
    return read_first_line(project_root / ".ruby-version")


def detect_php_version(project_root: Path) -> Optional[str]:
    """composer.json require.php constraint."""
    composer = read_json(project_root / "composer.json")
    return _non_empty(get_nested_str(composer, "require", "php"))


# Every language has an entry; None means no version sources are known.
VERSION_READERS: Dict[Language, Optional[VersionReader]] = {
    Language.RUST: detect_rust_version,
    Language.JAVASCRIPT: detect_node_version,
    Language.GO: detect_go_version,
    Language.PYTHON: detect_python_version,
    Language.JAVA: detect_java_version,
    Language.PHP: detect_php_version,
    Language.RUBY: detect_ruby_version,
    Language.SWIFT: None,
    Language.DART: None,
    Language.ELIXIR: None,
    Language.HASKELL: None,
    Language.CLOJURE: None,
    Language.CPP: None,
    Language.CSHARP: None,
}


def detect_language_version(project_root: Path, language: Language) -> Optional[str]:
    """Detect the language/runtime version a project pins.

    Args:
        project_root: Project root directory.
        language: Detected primary language.

    Returns:
        Raw version string, or None if nothing declares one.
    """
    reader = VERSION_READERS[language]
    if reader is None:
        return None
    version = reader(project_root)
    if version:
        LOGGER.debug(f"{language.value} version: {version}")
    return version or None
