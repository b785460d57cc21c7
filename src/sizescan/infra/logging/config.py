from __future__ import annotations

"""
Logging Settings.

Maps the CLI's log settings onto what the logging core installs. Console
output stays terse for normal runs; DEBUG runs also name the worker
thread that emitted each record, since filesystem calls are spread over
a thread pool.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
DEBUG_CONSOLE_FORMAT = "%(levelname)s | %(threadName)s | %(name)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(threadName)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: Optional[str]) -> int:
    """Convert a level name to its numeric constant, falling back to INFO."""
    if not level:
        return logging.INFO
    return LOG_LEVELS.get(str(level).strip().upper(), logging.INFO)


@dataclass(frozen=True)
class LoggingConfig:
    """
    Logging settings for one CLI run.

    Attributes:
        level: Minimum severity level to capture.
        console: Write records to stderr.
        log_file: Optional path for a rotating diagnostic log.
        max_bytes: Size of one log segment before rotation.
        backup_count: Number of rotated segments to keep.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2

    @classmethod
    def from_settings(cls, settings: Dict[str, Any]) -> LoggingConfig:
        """Build from a validated configuration ('log_level', 'log_file')."""
        return cls(
            level=settings.get("log_level") or "INFO",
            log_file=settings.get("log_file") or None,
        )

    @property
    def level_int(self) -> int:
        return parse_level(self.level)

    @property
    def console_format(self) -> str:
        if self.level_int <= logging.DEBUG:
            return DEBUG_CONSOLE_FORMAT
        return CONSOLE_FORMAT
