"""
Severity levels for the leveled logger.

The order is DEBUG < TRACE < INFO < WARNING < ERROR < NONE. NONE is a
threshold-only level that silences everything. INVALID is the sentinel
returned by a failed parse and is not a level at all.

String conversion is intentionally not a perfect inverse: the six real
levels round-trip through ``severity_name``/``parse_severity``, while
``severity_name(Severity.INVALID)`` is ``""`` and nothing parses to INVALID
without an accompanying error.
"""

from __future__ import annotations

from enum import IntEnum


class Severity(IntEnum):
    INVALID = -1
    DEBUG = 0
    TRACE = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    NONE = 5

    def __str__(self) -> str:
        return severity_name(self)

    @classmethod
    def from_string(cls, text: str) -> "Severity":
        """Return the level named by ``text`` or raise InvalidSeverityError."""
        level, err = parse_severity(text)
        if err is not None:
            raise err
        return level


_NAMES: dict[int, str] = {
    Severity.DEBUG: "DEBUG",
    Severity.TRACE: "TRACE",
    Severity.INFO: "INFO",
    Severity.WARNING: "WARNING",
    Severity.ERROR: "ERROR",
    Severity.NONE: "NONE",
}

_BY_NAME: dict[str, Severity] = {name.lower(): Severity(value) for value, name in _NAMES.items()}

# Levels a message can be emitted at (NONE only makes sense as a threshold).
EMITTABLE = (Severity.DEBUG, Severity.TRACE, Severity.INFO, Severity.WARNING, Severity.ERROR)


class InvalidSeverityError(ValueError):
    """Raised (or returned) when text does not name a severity."""

    severity = Severity.INVALID

    def __init__(self, text: str):
        self.text = text
        valid = ", ".join(_NAMES.values())
        super().__init__(f"invalid log level {text!r}: expected one of {valid} (case-insensitive)")


def severity_name(value: int) -> str:
    """Canonical name for a level, or "" for anything that is not one of the six."""
    return _NAMES.get(int(value), "")


def parse_severity(text: str) -> tuple[Severity, InvalidSeverityError | None]:
    """Case-insensitive exact match of ``text`` against the canonical names.

    Surrounding whitespace is not stripped, so " debug" and "DEBUG " fail.
    Never raises: failures come back as ``(Severity.INVALID, error)``.
    """
    level = _BY_NAME.get(text.lower()) if isinstance(text, str) else None
    if level is None:
        return Severity.INVALID, InvalidSeverityError(text)
    return level, None
