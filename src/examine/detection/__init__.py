"""Project detection module.

This module provides automatic detection of:
- The primary programming language and its pinned version
- The application framework and its declared version
- The project name

Usage:
    from examine.detection import ProjectDetector

    detector = ProjectDetector()
    info = detector.detect(".")
"""

from examine.detection.detector import ProjectDetector, detect_project_info

__all__ = [
    "ProjectDetector",
    "detect_project_info",
]
