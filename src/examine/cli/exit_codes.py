"""Exit codes for the examine CLI.

- 0: Success
- 1: Detection failed, or unknown/missing command
- 2: Configuration error
"""

from __future__ import annotations

EXIT_SUCCESS = 0
EXIT_DETECTION_FAILED = 1
EXIT_INVALID_USAGE = 1
EXIT_CONFIG_ERROR = 2
