"""Coerce loosely typed lists (as decoded from state or config) into typed lists."""

from collections.abc import Iterable
from typing import Any


def interface_slice_to_int_slice(values: Iterable[Any]) -> list[int]:
    """Same length as ``values``; anything that is not an int becomes 0."""
    # bool is an int subclass but never a valid int attribute value
    return [v if isinstance(v, int) and not isinstance(v, bool) else 0 for v in values]


def interface_slice_to_string_slice(values: Iterable[Any]) -> list[str]:
    """Same length as ``values``; anything that is not a str becomes ""."""
    return [v if isinstance(v, str) else "" for v in values]
