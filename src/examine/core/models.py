"""Result model shared by the detector, reporters and CLI."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Language(str, Enum):
    """Languages the detector can report.

    Member order is the manifest precedence order and also breaks ties
    in extension voting.
    """

    RUST = "Rust"
    JAVASCRIPT = "JavaScript"
    GO = "Go"
    PYTHON = "Python"
    JAVA = "Java"
    PHP = "PHP"
    RUBY = "Ruby"
    SWIFT = "Swift"
    DART = "Dart"
    ELIXIR = "Elixir"
    HASKELL = "Haskell"
    CLOJURE = "Clojure"
    CPP = "C++"
    CSHARP = "C#"


class StatusKind(str, Enum):
    """Lifecycle classification of a language version."""

    SUPPORTED = "supported"
    ENDING_SOON = "ending_soon"
    END_OF_LIFE = "end_of_life"
    UNKNOWN = "unknown"


_DATED_KINDS = (StatusKind.ENDING_SOON, StatusKind.END_OF_LIFE)


@dataclass(frozen=True)
class LanguageStatus:
    """Lifecycle status of a language version.

    ``date`` is the ISO-8601 day the status takes (or took) effect and is
    only present for ending-soon and end-of-life statuses.
    """

    kind: StatusKind = StatusKind.UNKNOWN
    date: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind in _DATED_KINDS and not self.date:
            raise ValueError(f"Status '{self.kind.value}' requires a date")
        if self.kind not in _DATED_KINDS and self.date is not None:
            raise ValueError(f"Status '{self.kind.value}' does not take a date")

    @classmethod
    def supported(cls) -> "LanguageStatus":
        return cls(StatusKind.SUPPORTED)

    @classmethod
    def ending_soon(cls, date: str) -> "LanguageStatus":
        return cls(StatusKind.ENDING_SOON, date)

    @classmethod
    def end_of_life(cls, date: str) -> "LanguageStatus":
        return cls(StatusKind.END_OF_LIFE, date)

    @classmethod
    def unknown(cls) -> "LanguageStatus":
        return cls(StatusKind.UNKNOWN)

    def __str__(self) -> str:
        if self.kind == StatusKind.SUPPORTED:
            return "✅ Supported"
        if self.kind == StatusKind.ENDING_SOON:
            return f"⚠️ Ending Soon ({self.date})"
        if self.kind == StatusKind.END_OF_LIFE:
            return f"❌ End of Life ({self.date})"
        return "❓ Unknown"

    def to_dict(self) -> Dict[str, Any]:
        return {"status": self.kind.value, "date": self.date}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LanguageStatus":
        return cls(StatusKind(data.get("status", StatusKind.UNKNOWN.value)), data.get("date"))


@dataclass(frozen=True)
class FrameworkDetails:
    """Descriptive metadata for a recognized framework."""

    framework_type: str
    alternatives: Tuple[str, ...] = ()
    is_popular: bool = False
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "framework_type": self.framework_type,
            "alternatives": list(self.alternatives),
            "is_popular": self.is_popular,
            "description": self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FrameworkDetails":
        return cls(
            framework_type=data["framework_type"],
            alternatives=tuple(data.get("alternatives") or ()),
            is_popular=bool(data.get("is_popular", False)),
            description=data.get("description"),
        )


@dataclass(frozen=True)
class ProjectInfo:
    """Fingerprint of a project produced by one detection run.

    Instances are immutable. The ``with_*`` helpers return updated copies,
    which lets the detector assemble a result step by step.
    """

    language: str
    """Display name of the primary language (e.g. ``"Rust"``)."""

    project_path: str
    """The analyzed path exactly as it was given."""

    language_version: Optional[str] = None
    """Raw version token as found in the project files."""

    language_status: LanguageStatus = field(default_factory=LanguageStatus.unknown)
    """Lifecycle status of ``language_version``."""

    framework: Optional[str] = None
    """Display name of the detected framework."""

    framework_version: Optional[str] = None
    """Declared framework version, only set alongside ``framework``."""

    framework_details: Optional[FrameworkDetails] = None
    """Knowledge-base metadata, only set alongside ``framework``."""

    project_name: Optional[str] = None
    """Declared project name or the directory name."""

    def __post_init__(self) -> None:
        if not self.language:
            raise ValueError("language must be a non-empty string")
        if self.framework is None and (
            self.framework_version is not None or self.framework_details is not None
        ):
            raise ValueError("framework_version/framework_details require a framework")

    def with_language_version(self, version: str) -> "ProjectInfo":
        return replace(self, language_version=version)

    def with_language_status(self, status: LanguageStatus) -> "ProjectInfo":
        return replace(self, language_status=status)

    def with_framework(self, name: str, version: Optional[str] = None) -> "ProjectInfo":
        return replace(self, framework=name, framework_version=version)

    def with_framework_details(self, details: FrameworkDetails) -> "ProjectInfo":
        return replace(self, framework_details=details)

    def with_project_name(self, name: str) -> "ProjectInfo":
        return replace(self, project_name=name)

    def summary(self) -> str:
        """One-line description, e.g. ``"JavaScript + v18.0 + React v18.2.0"``."""
        parts = [self.language]
        if self.language_version is not None:
            parts.append(f"v{self.language_version}")
        if self.framework is not None:
            if self.framework_version is not None:
                parts.append(f"{self.framework} v{self.framework_version}")
            else:
                parts.append(self.framework)
        return " + ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "language": self.language,
            "language_version": self.language_version,
            "language_status": self.language_status.to_dict(),
            "framework": self.framework,
            "framework_version": self.framework_version,
            "framework_details": (
                self.framework_details.to_dict() if self.framework_details else None
            ),
            "project_name": self.project_name,
            "project_path": self.project_path,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProjectInfo":
        status_data = data.get("language_status")
        details_data = data.get("framework_details")
        return cls(
            language=data["language"],
            project_path=data["project_path"],
            language_version=data.get("language_version"),
            language_status=(
                LanguageStatus.from_dict(status_data)
                if status_data
                else LanguageStatus.unknown()
            ),
            framework=data.get("framework"),
            framework_version=data.get("framework_version"),
            framework_details=(
                FrameworkDetails.from_dict(details_data) if details_data else None
            ),
            project_name=data.get("project_name"),
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)
