"""
Diff suppression functions for schema fields.

A diff suppress function receives the attribute key, the old (state) value and
the new (config) value and returns True when the difference should be ignored.
"""

from typing import Any


def diff_suppress_string_ignore_case(key: str, old: str, new: str, data: Any = None) -> bool:
    """Suppress the diff of a string attribute when old and new differ only in case.

    Case is compared character by character (simple folding), so "Straße" and
    "STRASSE" still differ. ``key`` and ``data`` are part of the diff suppress
    signature and unused here.
    """
    if len(old) != len(new):
        return False
    return all(a == b or a.lower() == b.lower() or a.upper() == b.upper() for a, b in zip(old, new))
