"""Configuration loading for examine."""

from examine.config.loader import ConfigError, load_config
from examine.config.models import ExamineConfig, OutputConfig

__all__ = [
    "ConfigError",
    "ExamineConfig",
    "OutputConfig",
    "load_config",
]
