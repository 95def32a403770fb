from __future__ import annotations

"""
Logging Configuration Models.

Describes how the CLI wants its diagnostics delivered: console output on
stderr and, when `--log-file` is given, a size-rotated log file.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from filereq.domain.config import KNOWN_LOG_LEVELS

_LEVEL_MAP: Dict[str, int] = {
    name: logging.WARNING if name == "WARN" else logging.getLevelName(name)
    for name in KNOWN_LOG_LEVELS
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable logging setup for one filereq process.

    Attributes:
        level: Level name, one of KNOWN_LOG_LEVELS.
        console: Write records to stderr.
        log_file: Rotating log file path, or None for console only.
        max_bytes: Size at which the log file is rolled over.
        backup_count: Rolled-over files kept next to the active one.
        console_fmt: Record format on stderr.
        file_fmt: Record format in the log file.
        datefmt: Timestamp format of file records.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    # A check run logs little; small segments keep the files readable
    max_bytes: int = 256 * 1024
    backup_count: int = 2

    console_fmt: str = "%(levelname)s | %(message)s"
    file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"


def logging_config_from(config: Dict[str, object]) -> LoggingConfig:
    """Build the logging setup from a validated runtime configuration."""
    log_file = config.get("log_file")
    return LoggingConfig(
        level=str(config.get("log_level") or "INFO"),
        log_file=str(log_file) if log_file else None,
    )
