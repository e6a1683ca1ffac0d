"""Static knowledge tables: language lifecycles and framework metadata."""

from examine.knowledge.frameworks import (
    FrameworkKnowledgeBase,
    get_framework_details,
    get_framework_popularity,
    get_learning_difficulty,
    get_use_cases,
    is_enterprise_ready,
)
from examine.knowledge.lifecycle import classify, normalize_version

__all__ = [
    "FrameworkKnowledgeBase",
    "classify",
    "get_framework_details",
    "get_framework_popularity",
    "get_learning_difficulty",
    "get_use_cases",
    "is_enterprise_ready",
    "normalize_version",
]
