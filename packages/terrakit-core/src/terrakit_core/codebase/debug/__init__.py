import logging
import os
import time
from collections.abc import Mapping
from functools import wraps

_SPY_LOGGER = logging.getLogger("terrakit.spy")


def spy_enabled() -> bool:
    val = os.getenv("TERRAKIT_SPY", "0")
    return str(val).lower() not in {"", "0", "false", "no"}


def _describe(result) -> str:
    # schema maps are the common return value; report their top-level size
    if isinstance(result, Mapping):
        return f"{len(result)} field(s)"
    return type(result).__name__


def spy_trace(func):
    """Trace calls to ``func`` on terrakit.spy when TERRAKIT_SPY is set.

    Logs entry, then exit with the result size and elapsed time, or the
    exception type when the call fails (the exception still propagates).
    """

    @wraps(func)
    def wrapper(*args, **kwargs):
        if not spy_enabled():
            return func(*args, **kwargs)
        _SPY_LOGGER.debug("Entering %s", func.__qualname__)
        start = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            _SPY_LOGGER.debug("Failed %s: %s", func.__qualname__, type(e).__name__)
            raise
        elapsed_ms = (time.perf_counter() - start) * 1000
        _SPY_LOGGER.debug("Exiting %s -> %s in %.3f ms", func.__qualname__, _describe(result), elapsed_ms)
        return result

    return wrapper
