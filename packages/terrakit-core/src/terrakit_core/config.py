"""
Environment configuration for terrakit loggers.

Environment flags (all optional):

    TERRAKIT_LOG_LEVEL = "DEBUG" | "TRACE" | "INFO" | "WARNING" | "ERROR" | "NONE"
        Default: "INFO". Case-insensitive. Threshold for LevelLogger output.

    TERRAKIT_LOG_FLAGS = comma/pipe separated LogFlags names, e.g. "date,time,utc"
        Default: "std". "none" disables the timestamp prefix.

    TERRAKIT_SPY = "0" | "1"
        Default: "0". If "1", traced library calls log entry/exit on terrakit.spy.

Invalid values fall back to the defaults and log a warning on terrakit.config.
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import IO

from terrakit_core.log import LevelLogger, LogFlags, Severity, parse_severity

_logger = logging.getLogger("terrakit.config")

DEFAULT_LEVEL = Severity.INFO
DEFAULT_FLAGS = LogFlags.STD


@dataclass(frozen=True)
class LoggingConfig:
    level: Severity = DEFAULT_LEVEL
    flags: LogFlags = DEFAULT_FLAGS

    @classmethod
    def from_env(cls) -> "LoggingConfig":
        level = DEFAULT_LEVEL
        raw_level = os.getenv("TERRAKIT_LOG_LEVEL")
        if raw_level is not None:
            parsed, err = parse_severity(raw_level)
            if err is None:
                level = parsed
            else:
                _logger.warning("Ignoring TERRAKIT_LOG_LEVEL: %s", err)

        flags = DEFAULT_FLAGS
        raw_flags = os.getenv("TERRAKIT_LOG_FLAGS")
        if raw_flags is not None:
            try:
                flags = LogFlags.from_string(raw_flags)
            except ValueError as e:
                _logger.warning("Ignoring TERRAKIT_LOG_FLAGS: %s", e)

        return cls(level=level, flags=flags)


def new_level_logger_from_env(sink: IO[str] | IO[bytes] | None = None) -> LevelLogger:
    """Build a LevelLogger on ``sink`` (stderr by default) from the environment."""
    cfg = LoggingConfig.from_env()
    return LevelLogger(sink if sink is not None else sys.stderr, cfg.flags, cfg.level)
