"""examine - fingerprint a project directory.

Reports the primary language, its pinned version and lifecycle status,
and the application framework with descriptive metadata.

Usage:
    from examine import examine

    info = examine("path/to/project")
    print(info.summary())
"""

from __future__ import annotations

from examine.core.errors import DetectionError, LanguageUndetectedError, PathNotFoundError
from examine.core.models import FrameworkDetails, Language, LanguageStatus, ProjectInfo, StatusKind
from examine.detection.detector import PathLike, ProjectDetector, detect_project_info

__version__ = "0.3.0"


def examine(path: PathLike) -> ProjectInfo:
    """Analyze a project directory.

    Args:
        path: Project directory (str or path-like).

    Returns:
        ProjectInfo describing the project.

    Raises:
        DetectionError: If the path is missing or no language is found.
    """
    return detect_project_info(path)


__all__ = [
    "DetectionError",
    "FrameworkDetails",
    "Language",
    "LanguageStatus",
    "LanguageUndetectedError",
    "PathNotFoundError",
    "ProjectDetector",
    "ProjectInfo",
    "StatusKind",
    "detect_project_info",
    "examine",
    "__version__",
]
