from .level_logger import LevelLogger, LogFlags
from .levels import EMITTABLE, InvalidSeverityError, Severity, parse_severity, severity_name

__all__ = [
    "EMITTABLE",
    "InvalidSeverityError",
    "LevelLogger",
    "LogFlags",
    "Severity",
    "parse_severity",
    "severity_name",
]
