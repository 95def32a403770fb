from __future__ import annotations

"""
Runtime Configuration Defaults.

Provides the dictionary of settings driving a check run from the command
line. Values are normalized by filereq.core.validator before use.
"""

import os
from typing import Any, Dict, List

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
DEFAULT_LOG_LEVEL = "INFO"
KNOWN_LOG_LEVELS: List[str] = ["DEBUG", "INFO", "WARNING", "WARN", "ERROR", "CRITICAL"]


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Path resolution
        "base_dir": os.getcwd(),
        "follow_symlinks": True,

        # Output
        "print_tree": False,
        "json_output": False,

        # Diagnostics
        "log_level": DEFAULT_LOG_LEVEL,
        "log_file": None,
    }
