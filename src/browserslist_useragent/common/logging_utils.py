"""Logging helpers shared across modules.

The package never configures logging on import; applications call
configure_logging() or set up handlers themselves.
"""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from ..constants import Constants

_CONFIGURED = False


def configure_logging(level: Optional[str] = None) -> None:
    """Install a root handler once, using Constants.LOG_FORMAT.

    Args:
        level: Level name; falls back to BROWSERSLIST_UA_LOG_LEVEL, then WARNING.
    """
    global _CONFIGURED  # pylint: disable=global-statement
    level_name = (level or os.environ.get(Constants.ENV_LOG_LEVEL) or Constants.DEFAULT_LOG_LEVEL).upper()
    level_value = getattr(logging, level_name, None)
    if not isinstance(level_value, int):
        level_value = logging.WARNING

    if not _CONFIGURED:
        logging.basicConfig(level=level_value, format=Constants.LOG_FORMAT)
        _CONFIGURED = True
    logging.getLogger().setLevel(level_value)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when DEBUG records from logger would be emitted."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build an ``extra=`` payload, dropping fields whose value is None."""
    return {key: value for key, value in fields.items() if value is not None}


class Timer:
    """Context manager measuring wall-clock duration."""

    def __init__(self):
        self._start = 0.0
        self._end: Optional[float] = None

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self._end = time.perf_counter()

    def duration_ms(self) -> int:
        """Elapsed milliseconds, up to now if still running."""
        end = self._end if self._end is not None else time.perf_counter()
        return int((end - self._start) * 1000)
