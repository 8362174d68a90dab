from __future__ import annotations

"""
Logging Configuration Models.

The per-run choices made by the CLI (level, console output, log file) plus
the fixed rotation policy and record formats shared by every run.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}

LOG_MAX_BYTES: int = 1024 * 1024
LOG_BACKUP_COUNT: int = 3

CONSOLE_FORMAT: str = "%(levelname)s | %(message)s"
FILE_FORMAT: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Per-run logging choices.

    Attributes:
        level: Minimum severity ('DEBUG' with --debug, otherwise 'INFO').
        console: Mirror records to stderr.
        log_file: Rotating log file path, or None when file logging is off.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
