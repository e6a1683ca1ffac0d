"""Language version lifecycle tables.

Maps a (language, version) pair to a lifecycle status. The cutovers below
are a point-in-time policy snapshot; they are not checked against any
upstream release calendar and will need updating by hand.
"""

from __future__ import annotations

import re
import string
from typing import Callable, Dict, Optional, Sequence, Tuple

from examine.core.models import Language, LanguageStatus

# Characters stripped from the front of a raw version (v-prefix and comparators)
_VERSION_PREFIX_CHARS = "v><=^~"

_LEADING_INT = re.compile(r"^(\d+)")
_NUMERIC_VERSION = re.compile(r"^\d+(\.\d+)*")

SUPPORTED = LanguageStatus.supported()
UNKNOWN = LanguageStatus.unknown()

# Rust: dotted prefixes, first match wins, no catch-all.
RUST_PREFIX_RULES: Sequence[Tuple[Tuple[str, ...], LanguageStatus]] = (
    (("1.75", "1.76", "1.77", "1.78"), SUPPORTED),
    (("1.70", "1.71", "1.72", "1.73", "1.74"), LanguageStatus.ending_soon("2024-12-31")),
    (("1.6", "1.5"), LanguageStatus.end_of_life("2023-01-01")),
)

# Go: dotted prefixes, any other numeric version is end of life.
GO_PREFIX_RULES: Sequence[Tuple[Tuple[str, ...], LanguageStatus]] = (
    (("1.22", "1.21"), SUPPORTED),
    (("1.20",), LanguageStatus.ending_soon("2024-08-01")),
    (("1.19",), LanguageStatus.end_of_life("2024-02-01")),
    (("1.18",), LanguageStatus.end_of_life("2023-08-01")),
)
GO_FALLBACK = LanguageStatus.end_of_life("2023-01-01")

# Node.js: major version.
NODE_MAJOR_RULES: Dict[int, LanguageStatus] = {
    20: SUPPORTED,
    18: SUPPORTED,
    16: LanguageStatus.ending_soon("2024-04-30"),
    14: LanguageStatus.end_of_life("2023-04-30"),
    12: LanguageStatus.end_of_life("2022-04-30"),
}
NODE_SUPPORTED_FROM = 21
NODE_FALLBACK = LanguageStatus.end_of_life("2022-01-01")

# Python: (major, minor).
PYTHON_RULES: Dict[Tuple[int, int], LanguageStatus] = {
    (3, 12): SUPPORTED,
    (3, 11): SUPPORTED,
    (3, 10): SUPPORTED,
    (3, 9): LanguageStatus.ending_soon("2025-10-01"),
    (3, 8): LanguageStatus.end_of_life("2024-10-01"),
    (3, 7): LanguageStatus.end_of_life("2023-06-27"),
    (2, 7): LanguageStatus.end_of_life("2020-01-01"),
}
PYTHON_SUPPORTED_FROM_MINOR = 13
PYTHON_FALLBACK = LanguageStatus.end_of_life("2023-01-01")

# Java: major version.
JAVA_MAJOR_RULES: Dict[int, LanguageStatus] = {
    21: SUPPORTED,
    17: SUPPORTED,
    11: SUPPORTED,
    8: LanguageStatus.ending_soon("2025-12-31"),
}
JAVA_SUPPORTED_FROM = 22
JAVA_INTERIM_RANGE = range(9, 21)
JAVA_INTERIM_STATUS = LanguageStatus.end_of_life("2023-01-01")
JAVA_FALLBACK = LanguageStatus.end_of_life("2022-01-01")


def normalize_version(raw_version: str) -> str:
    """Reduce a raw version or requirement string to a bare version token.

    Strips surrounding whitespace, a ``v`` prefix and comparator prefixes
    (``>=``, ``<=``, ``=``, ``>``, ``<``, ``^``, ``~``), then keeps the first
    whitespace-delimited token. ``">= 3.8 < 4"`` becomes ``"3.8"``.

    Args:
        raw_version: Version as found in a project file.

    Returns:
        Normalized version, or an empty string if nothing is left.
    """
    stripped = raw_version.strip().lstrip(_VERSION_PREFIX_CHARS + string.whitespace)
    tokens = stripped.split()
    return tokens[0] if tokens else ""


def _leading_int(segment: str) -> Optional[int]:
    match = _LEADING_INT.match(segment)
    return int(match.group(1)) if match else None


def extract_major_version(version: str) -> Optional[int]:
    """Return the leading integer of a normalized version, if any."""
    return _leading_int(version.split(".", 1)[0])


def _match_prefix(
    version: str,
    rules: Sequence[Tuple[Tuple[str, ...], LanguageStatus]],
) -> Optional[LanguageStatus]:
    for prefixes, status in rules:
        if version.startswith(prefixes):
            return status
    return None


def _rust_status(version: str) -> LanguageStatus:
    return _match_prefix(version, RUST_PREFIX_RULES) or UNKNOWN


def _go_status(version: str) -> LanguageStatus:
    if not _NUMERIC_VERSION.match(version):
        return UNKNOWN
    return _match_prefix(version, GO_PREFIX_RULES) or GO_FALLBACK


def _node_status(version: str) -> LanguageStatus:
    major = extract_major_version(version)
    if major is None:
        return UNKNOWN
    if major in NODE_MAJOR_RULES:
        return NODE_MAJOR_RULES[major]
    if major >= NODE_SUPPORTED_FROM:
        return SUPPORTED
    return NODE_FALLBACK


def _python_status(version: str) -> LanguageStatus:
    segments = version.split(".")
    if len(segments) < 2:
        return UNKNOWN
    major = _leading_int(segments[0])
    minor = _leading_int(segments[1])
    if major is None or minor is None:
        return UNKNOWN
    if (major, minor) in PYTHON_RULES:
        return PYTHON_RULES[(major, minor)]
    if major >= 3 and minor >= PYTHON_SUPPORTED_FROM_MINOR:
        return SUPPORTED
    return PYTHON_FALLBACK


def _java_status(version: str) -> LanguageStatus:
    segments = version.split(".")
    major = _leading_int(segments[0])
    if major is None:
        return UNKNOWN
    # Legacy "1.8" numbering means Java 8
    if major == 1 and len(segments) > 1:
        legacy = _leading_int(segments[1])
        if legacy is not None:
            major = legacy
    if major in JAVA_MAJOR_RULES:
        return JAVA_MAJOR_RULES[major]
    if major >= JAVA_SUPPORTED_FROM:
        return SUPPORTED
    if major in JAVA_INTERIM_RANGE:
        return JAVA_INTERIM_STATUS
    return JAVA_FALLBACK


_CLASSIFIERS: Dict[Language, Callable[[str], LanguageStatus]] = {
    Language.RUST: _rust_status,
    Language.JAVASCRIPT: _node_status,
    Language.GO: _go_status,
    Language.PYTHON: _python_status,
    Language.JAVA: _java_status,
}


def classify(language: str, raw_version: str) -> LanguageStatus:
    """Classify a language version against the lifecycle tables.

    Args:
        language: Language display name (``"Python"``) or ``Language`` member.
        raw_version: Version string as found in the project.

    Returns:
        The lifecycle status. Languages without a table and malformed
        versions yield ``LanguageStatus.unknown()``.
    """
    try:
        classifier = _CLASSIFIERS.get(Language(language))
    except ValueError:
        return UNKNOWN
    if classifier is None:
        return UNKNOWN
    return classifier(normalize_version(raw_version))


def has_lifecycle_table(language: str) -> bool:
    """Check whether lifecycle data exists for a language."""
    try:
        return Language(language) in _CLASSIFIERS
    except ValueError:
        return False
