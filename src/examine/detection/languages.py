"""Primary language detection.

Detects the project language by:
- Marker (manifest) files at the project root, in fixed precedence
- Majority vote over top-level file extensions when no marker exists
"""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from examine.core.errors import LanguageUndetectedError
from examine.core.logging import get_logger
from examine.core.models import Language

LOGGER = get_logger(__name__)

# Manifest files in precedence order; the first one present wins.
MARKER_FILES: List[Tuple[str, Language]] = [
    ("Cargo.toml", Language.RUST),
    ("package.json", Language.JAVASCRIPT),
    ("go.mod", Language.GO),
    ("pyproject.toml", Language.PYTHON),
    ("requirements.txt", Language.PYTHON),
    ("pom.xml", Language.JAVA),
    ("build.gradle", Language.JAVA),
    ("composer.json", Language.PHP),
    ("Gemfile", Language.RUBY),
    ("Package.swift", Language.SWIFT),
    ("pubspec.yaml", Language.DART),
    ("mix.exs", Language.ELIXIR),
    ("stack.yaml", Language.HASKELL),
    ("project.clj", Language.CLOJURE),
    ("CMakeLists.txt", Language.CPP),
    ("Makefile", Language.CPP),
]

# File extension (without dot, case-sensitive) to language
EXTENSION_MAP: Dict[str, Language] = {
    "rs": Language.RUST,
    "js": Language.JAVASCRIPT,
    "ts": Language.JAVASCRIPT,
    "jsx": Language.JAVASCRIPT,
    "tsx": Language.JAVASCRIPT,
    "go": Language.GO,
    "py": Language.PYTHON,
    "java": Language.JAVA,
    "php": Language.PHP,
    "rb": Language.RUBY,
    "swift": Language.SWIFT,
    "dart": Language.DART,
    "ex": Language.ELIXIR,
    "exs": Language.ELIXIR,
    "hs": Language.HASKELL,
    "clj": Language.CLOJURE,
    "cljs": Language.CLOJURE,
    "c": Language.CPP,
    "cpp": Language.CPP,
    "cc": Language.CPP,
    "cxx": Language.CPP,
    "cs": Language.CSHARP,
}

_LANGUAGE_ORDER = {language: index for index, language in enumerate(Language)}


def detect_by_marker(project_root: Path) -> Optional[Language]:
    """Return the language of the first marker file present, if any."""
    for marker, language in MARKER_FILES:
        if (project_root / marker).exists():
            LOGGER.debug(f"Found {marker}, language is {language.value}")
            return language
    return None


def count_extensions(project_root: Path) -> Counter:
    """Count top-level files per language by extension.

    Only regular files directly inside ``project_root`` are counted.

    Args:
        project_root: Directory to inspect.

    Returns:
        Counter mapping Language to file count.
    """
    counts: Counter = Counter()
    if not project_root.is_dir():
        return counts
    try:
        entries = list(project_root.iterdir())
    except OSError as e:
        LOGGER.debug(f"Cannot list {project_root}: {e}")
        return counts

    for entry in entries:
        suffix = entry.suffix
        if not suffix:
            continue
        language = EXTENSION_MAP.get(suffix[1:])
        if language is None:
            continue
        try:
            if not entry.is_file():
                continue
        except OSError:
            continue
        counts[language] += 1
    return counts


def detect_by_extensions(project_root: Path) -> Optional[Language]:
    """Pick the language with the most top-level source files.

    Ties go to the language listed first in ``Language``.
    """
    counts = count_extensions(project_root)
    if not counts:
        return None
    language = min(counts, key=lambda lang: (-counts[lang], _LANGUAGE_ORDER[lang]))
    LOGGER.debug(f"Extension vote {dict((k.value, v) for k, v in counts.items())} -> {language.value}")
    return language


def detect_language(project_root: Path) -> Language:
    """Detect the primary language of a project.

    Args:
        project_root: Path to the project root directory.

    Returns:
        Detected Language.

    Raises:
        LanguageUndetectedError: If no marker file matches and no source
            file extension is recognized.
    """
    language = detect_by_marker(project_root)
    if language is None:
        language = detect_by_extensions(project_root)
    if language is None:
        raise LanguageUndetectedError(str(project_root))
    return language
