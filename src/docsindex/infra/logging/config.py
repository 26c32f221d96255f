from __future__ import annotations

"""
Logging Configuration Models.

Defines the configuration dataclass and severity level mapping used to
initialize the logging subsystem.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Rotation of the optional log file
LOG_MAX_BYTES = 1024 * 1024
LOG_BACKUP_COUNT = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Settings the CLI passes to configure_logging.

    Attributes:
        level: Minimum severity level to capture (DEBUG with --debug).
        console: Flag to enable stderr stream output.
        log_file: Optional path for a rotating log file (--log-file).
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
