"""Fatal detection errors.

Only these conditions abort detection; every other lookup failure is
reported in-band as an absent field on the result.
"""

from __future__ import annotations


class DetectionError(Exception):
    """Base class for errors that abort project detection."""

    pass


class PathNotFoundError(DetectionError):
    """The path handed to the detector does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Path does not exist: {path}")


class LanguageUndetectedError(DetectionError):
    """Neither a manifest file nor extension voting identified a language."""

    def __init__(self, path: str):
        self.path = path
        super().__init__("Could not detect project language")
