"""Location of the examine home directory.

The home holds the global configuration at ``config/config.yml``.
"""

from __future__ import annotations

import os
from pathlib import Path

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".examine"

# Environment variable to override home directory
EXAMINE_HOME_ENV = "EXAMINE_HOME"


def get_examine_home() -> Path:
    """Get the examine home directory path.

    Resolution order:
    1. EXAMINE_HOME environment variable (if set)
    2. ~/.examine (default)

    Returns:
        Path to the examine home directory.
    """
    env_home = os.environ.get(EXAMINE_HOME_ENV)
    if env_home:
        return Path(env_home)
    return Path.home() / DEFAULT_HOME_DIR_NAME
