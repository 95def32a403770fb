from __future__ import annotations

from .config import LoggingConfig, logging_config_from
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    get_logger,
)
from .handlers import _HANDLER_TAG_ATTR

__all__ = [
    "LoggingConfig",
    "configure_logging",
    "get_logger",
    "logging_config_from",
]
