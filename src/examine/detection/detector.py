"""Main project detector orchestrating all detection modules."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Union

from examine.core.errors import PathNotFoundError
from examine.core.logging import get_logger
from examine.core.models import ProjectInfo
from examine.detection.frameworks import detect_framework
from examine.detection.languages import detect_language
from examine.detection.project_name import detect_project_name
from examine.detection.versions import detect_language_version
from examine.knowledge.frameworks import FrameworkKnowledgeBase
from examine.knowledge.lifecycle import classify

LOGGER = get_logger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class ProjectDetector:
    """Orchestrates project detection.

    Language detection runs first and is mandatory. The version, framework
    and name lookups only read files and never fail; each one degrades to
    an absent value on its own.
    """

    def __init__(self, knowledge_base: Optional[FrameworkKnowledgeBase] = None):
        """Initialize ProjectDetector.

        Args:
            knowledge_base: Framework metadata source. Defaults to the
                built-in table.
        """
        self._knowledge_base = knowledge_base or FrameworkKnowledgeBase()

    def detect(self, path: PathLike) -> ProjectInfo:
        """Detect project characteristics.

        Args:
            path: Project directory (str or path-like).

        Returns:
            ProjectInfo with everything that could be detected.

        Raises:
            PathNotFoundError: If ``path`` does not exist.
            LanguageUndetectedError: If no language can be inferred.
        """
        given = os.fspath(path)
        project_root = Path(given)
        if not project_root.exists():
            raise PathNotFoundError(given)

        language = detect_language(project_root)
        info = ProjectInfo(language=language.value, project_path=given)

        version = detect_language_version(project_root, language)
        if version:
            info = info.with_language_version(version).with_language_status(
                classify(language.value, version)
            )

        framework = detect_framework(project_root, language)
        if framework:
            info = info.with_framework(framework.name, framework.version)
            details = self._knowledge_base.lookup(framework.name)
            if details:
                info = info.with_framework_details(details)

        name = detect_project_name(project_root, language)
        if name:
            info = info.with_project_name(name)

        LOGGER.info(f"{given}: {info.summary()}")
        return info


def detect_project_info(path: PathLike) -> ProjectInfo:
    """Detect a project with the default detector.

    Args:
        path: Project directory (str or path-like).

    Returns:
        ProjectInfo for the project.

    Raises:
        DetectionError: If the path is missing or no language is found.
    """
    return ProjectDetector().detect(path)
