"""
Leveled logger writing single lines to an injected sink.

Usage:

    from terrakit_core.log import LevelLogger, LogFlags, Severity

    logger = LevelLogger(sys.stderr, LogFlags.STD, Severity.INFO)
    logger.info("created %s in %d ms", name, elapsed)
    logger.debug("never formatted: %r", expensive)  # below threshold

Each emitted line looks like ``2025/01/31 14:02:11 [INFO] created foo in 12 ms``.
The timestamp part is controlled by LogFlags; ``LogFlags.NONE`` drops it.

Records are handed straight to a StreamHandler on the sink, so concurrent
writers are serialised by the handler lock, the global ``logging.disable``
switch has no effect, and messages below the threshold are never formatted.
"""

from __future__ import annotations

import io
import logging
import re
from datetime import datetime, timezone
from enum import IntFlag
from typing import IO, Any

from .levels import EMITTABLE, Severity, severity_name

__all__ = ["LevelLogger", "LogFlags"]


class LogFlags(IntFlag):
    """Line-prefix options. STD is the date + time prefix."""

    NONE = 0
    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    UTC = 8
    STD = DATE | TIME

    @classmethod
    def from_string(cls, text: str) -> "LogFlags":
        """Parse "date,time", "std|utc", "none" and the like (case-insensitive)."""
        flags = cls.NONE
        for part in re.split(r"[,|]", text):
            name = part.strip().upper()
            if not name:
                continue
            try:
                flags |= cls[name]
            except KeyError:
                raise ValueError(f"unknown log flag {part.strip()!r}") from None
        return flags


# Stdlib numeric levels used internally; TRACE sits between DEBUG and INFO.
_STDLIB_LEVELS: dict[Severity, int] = {
    Severity.DEBUG: logging.DEBUG,
    Severity.TRACE: logging.DEBUG + 5,
    Severity.INFO: logging.INFO,
    Severity.WARNING: logging.WARNING,
    Severity.ERROR: logging.ERROR,
    Severity.NONE: logging.CRITICAL + 10,
}


class _PrefixFormatter(logging.Formatter):
    def __init__(self, flags: LogFlags):
        super().__init__()
        self.flags = flags

    def _timestamp(self, created: float) -> str:
        tz = timezone.utc if self.flags & LogFlags.UTC else None
        dt = datetime.fromtimestamp(created, tz=tz)
        parts: list[str] = []
        if self.flags & LogFlags.DATE:
            parts.append(dt.strftime("%Y/%m/%d"))
        if self.flags & (LogFlags.TIME | LogFlags.MICROSECONDS):
            clock = dt.strftime("%H:%M:%S")
            if self.flags & LogFlags.MICROSECONDS:
                clock += f".{dt.microsecond:06d}"
            parts.append(clock)
        return " ".join(parts)

    def format(self, record: logging.LogRecord) -> str:
        line = f"[{record.severity}] {record.getMessage()}"
        stamp = self._timestamp(record.created)
        return f"{stamp} {line}" if stamp else line


class _BinarySink:
    """Adapts a byte stream to the text interface StreamHandler writes to."""

    def __init__(self, raw: IO[bytes]):
        self.raw = raw

    def write(self, text: str) -> None:
        self.raw.write(text.encode("utf-8"))

    def flush(self) -> None:
        self.raw.flush()


def _is_binary(sink: Any) -> bool:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in getattr(sink, "mode", "")


class LevelLogger:
    """Writes a line per call when the call's severity reaches the threshold."""

    def __init__(self, sink: IO[str] | IO[bytes], flags: LogFlags = LogFlags.STD, threshold: Severity = Severity.INFO):
        threshold = Severity(threshold)
        if threshold is Severity.INVALID:
            raise ValueError("INVALID is not a usable threshold")
        self._threshold = threshold
        self._flags = LogFlags(flags)

        self._handler = logging.StreamHandler(_BinarySink(sink) if _is_binary(sink) else sink)
        self._handler.setFormatter(_PrefixFormatter(self._flags))

        # only builds records; gating is enabled_for alone, never logging.disable
        self._logger = logging.Logger(f"terrakit.level.{id(self):x}", level=_STDLIB_LEVELS[threshold])
        self._logger.propagate = False

    @property
    def threshold(self) -> Severity:
        return self._threshold

    @property
    def flags(self) -> LogFlags:
        return self._flags

    def enabled_for(self, severity: Severity) -> bool:
        return severity in EMITTABLE and severity >= self._threshold

    def log(self, severity: Severity, msg: str, *args: Any) -> None:
        if not self.enabled_for(severity):
            return
        record = self._logger.makeRecord(
            self._logger.name,
            _STDLIB_LEVELS[severity],
            "(terrakit)",
            0,
            msg,
            args,
            None,
            extra={"severity": severity_name(severity)},
        )
        self._handler.handle(record)

    def debug(self, msg: str, *args: Any) -> None:
        self.log(Severity.DEBUG, msg, *args)

    def trace(self, msg: str, *args: Any) -> None:
        self.log(Severity.TRACE, msg, *args)

    def info(self, msg: str, *args: Any) -> None:
        self.log(Severity.INFO, msg, *args)

    def warning(self, msg: str, *args: Any) -> None:
        self.log(Severity.WARNING, msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self.log(Severity.ERROR, msg, *args)

    def __repr__(self) -> str:
        return f"LevelLogger(threshold={self._threshold!s}, flags={self._flags!r})"
