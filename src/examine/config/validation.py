"""Configuration validation for examine.

Validates configuration keys and value types. Problems are returned as
warnings and logged; validation never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from difflib import get_close_matches
from typing import Any, Dict, List, Optional, Set

from examine.core.logging import get_logger
from examine.reporters import list_available_reporters

LOGGER = get_logger(__name__)

# Valid top-level keys
VALID_TOP_LEVEL_KEYS: Set[str] = {
    "output",
    "frameworks",
}

# Valid keys under output section
VALID_OUTPUT_KEYS: Set[str] = {
    "format",
}

# Valid keys for a framework entry
VALID_FRAMEWORK_KEYS: Set[str] = {
    "type",
    "alternatives",
    "popular",
    "description",
}


@dataclass
class ConfigValidationWarning:
    """A validation warning for configuration."""

    message: str
    source: str
    key: Optional[str] = None
    suggestion: Optional[str] = None


def validate_config(
    data: Dict[str, Any],
    source: str,
) -> List[ConfigValidationWarning]:
    """Validate configuration dictionary.

    Args:
        data: Config dictionary to validate.
        source: Source file path for warning messages.

    Returns:
        List of validation warnings.
    """
    warnings: List[ConfigValidationWarning] = []

    if not isinstance(data, dict):
        _add(warnings, f"Config must be a mapping, got {type(data).__name__}", source)
        return warnings

    for key in data.keys():
        if key not in VALID_TOP_LEVEL_KEYS:
            _add(
                warnings,
                f"Unknown top-level key '{key}'",
                source,
                key=key,
                suggestion=_suggest_key(key, VALID_TOP_LEVEL_KEYS),
            )

    output = data.get("output")
    if output is not None:
        if not isinstance(output, dict):
            _add(
                warnings,
                f"'output' must be a mapping, got {type(output).__name__}",
                source,
                key="output",
            )
        else:
            for key in output.keys():
                if key not in VALID_OUTPUT_KEYS:
                    _add(
                        warnings,
                        f"Unknown key 'output.{key}'",
                        source,
                        key=f"output.{key}",
                        suggestion=_suggest_key(key, VALID_OUTPUT_KEYS),
                    )
            fmt = output.get("format")
            formats = set(list_available_reporters())
            if fmt is not None and fmt not in formats:
                _add(
                    warnings,
                    f"Invalid output format '{fmt}'",
                    source,
                    key="output.format",
                    suggestion=_suggest_key(str(fmt), formats),
                )

    frameworks = data.get("frameworks")
    if frameworks is not None:
        if not isinstance(frameworks, dict):
            _add(
                warnings,
                f"'frameworks' must be a mapping, got {type(frameworks).__name__}",
                source,
                key="frameworks",
            )
        else:
            for name, entry in frameworks.items():
                warnings.extend(_validate_framework_entry(str(name), entry, source))

    return warnings


def _validate_framework_entry(
    name: str,
    entry: Any,
    source: str,
) -> List[ConfigValidationWarning]:
    warnings: List[ConfigValidationWarning] = []
    prefix = f"frameworks.{name}"

    if not isinstance(entry, dict):
        _add(warnings, f"'{prefix}' must be a mapping", source, key=prefix)
        return warnings

    for key in entry.keys():
        if key not in VALID_FRAMEWORK_KEYS:
            _add(
                warnings,
                f"Unknown key '{prefix}.{key}'",
                source,
                key=f"{prefix}.{key}",
                suggestion=_suggest_key(key, VALID_FRAMEWORK_KEYS),
            )

    if not isinstance(entry.get("type"), str):
        _add(warnings, f"'{prefix}.type' is required and must be a string", source, key=f"{prefix}.type")

    alternatives = entry.get("alternatives")
    if alternatives is not None and not (
        isinstance(alternatives, list) and all(isinstance(a, str) for a in alternatives)
    ):
        _add(warnings, f"'{prefix}.alternatives' must be a list of strings", source, key=f"{prefix}.alternatives")

    popular = entry.get("popular")
    if popular is not None and not isinstance(popular, bool):
        _add(warnings, f"'{prefix}.popular' must be a boolean", source, key=f"{prefix}.popular")

    description = entry.get("description")
    if description is not None and not isinstance(description, str):
        _add(warnings, f"'{prefix}.description' must be a string", source, key=f"{prefix}.description")

    return warnings


def _add(
    warnings: List[ConfigValidationWarning],
    message: str,
    source: str,
    key: Optional[str] = None,
    suggestion: Optional[str] = None,
) -> None:
    warning = ConfigValidationWarning(
        message=message,
        source=source,
        key=key,
        suggestion=suggestion,
    )
    warnings.append(warning)
    _log_warning(warning)


def _suggest_key(key: str, valid_keys: Set[str]) -> Optional[str]:
    """Suggest a similar valid key for typos."""
    matches = get_close_matches(key, sorted(valid_keys), n=1, cutoff=0.6)
    return matches[0] if matches else None


def _log_warning(warning: ConfigValidationWarning) -> None:
    """Log a validation warning."""
    msg = f"{warning.source}: {warning.message}"
    if warning.suggestion:
        msg += f" (did you mean '{warning.suggestion}'?)"
    LOGGER.warning(msg)
