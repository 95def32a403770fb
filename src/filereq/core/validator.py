from __future__ import annotations

"""
Configuration Validation Service.

Normalizes the runtime configuration assembled by the CLI (defaults plus
command-line overrides) before a check runs: directory and log file paths
become absolute, flags must be real booleans and the log level must be a
known level name.
"""

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from filereq.domain.config import KNOWN_LOG_LEVELS, get_default_config
from filereq.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_FLAG_FIELDS = ("follow_symlinks", "print_tree", "json_output")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    In lenient mode an invalid value is replaced by its default and a
    warning is recorded; in strict mode it raises instead.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises TypeError/ValueError on invalid values.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        _reject(TypeError(msg), warnings, strict)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _FLAG_FIELDS:
        if not isinstance(merged[field], bool):
            msg = f"Invalid field '{field}': expected bool, received {type(merged[field]).__name__}."
            _reject(TypeError(msg), warnings, strict)
            merged[field] = defaults[field]

    merged["base_dir"] = normalize_path(
        _optional_path(merged["base_dir"], "base_dir", warnings, strict),
        fallback=os.getcwd(),
    )

    log_file = _optional_path(merged["log_file"], "log_file", warnings, strict)
    merged["log_file"] = normalize_path(log_file, fallback="") if log_file else None

    merged["log_level"] = _normalize_log_level(
        merged["log_level"], defaults["log_level"], warnings, strict
    )

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _reject(error: Exception, warnings: List[str], strict: bool) -> None:
    if strict:
        raise error
    warnings.append(f"{error} Using default.")
    logger.debug(str(error))


def _optional_path(value: Any, field: str, warnings: List[str], strict: bool) -> Optional[str]:
    """Return a stripped path string, or None when unset or blank."""
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip() or None
    _reject(TypeError(f"Invalid field '{field}': expected str, received {type(value).__name__}."),
            warnings, strict)
    return None


def _normalize_log_level(level: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Upper-case the level name and reject unknown levels."""
    name = level.strip().upper() if isinstance(level, str) else ""
    if name in KNOWN_LOG_LEVELS:
        return name
    _reject(ValueError(f"Unknown log level '{level}'."), warnings, strict)
    return fallback
