"""
Tests for severity ordering and string conversion.
"""

import pytest
from terrakit_core.log import InvalidSeverityError, Severity, parse_severity, severity_name

CANONICAL = {
    Severity.DEBUG: "DEBUG",
    Severity.TRACE: "TRACE",
    Severity.INFO: "INFO",
    Severity.WARNING: "WARNING",
    Severity.ERROR: "ERROR",
    Severity.NONE: "NONE",
}


class TestSeverityName:
    """Level -> canonical name."""

    @pytest.mark.parametrize("level,name", list(CANONICAL.items()))
    def test_valid_levels(self, level, name):
        """Each real level has exactly its canonical uppercase name."""
        assert severity_name(level) == name
        assert str(level) == name

    @pytest.mark.parametrize("value", [1000, -99, 6, -2])
    def test_out_of_range_is_empty(self, value):
        """Unknown integers map to the empty string instead of failing."""
        assert severity_name(value) == ""

    def test_invalid_sentinel_has_no_name(self):
        """INVALID is not a level and has no canonical name."""
        assert severity_name(Severity.INVALID) == ""


class TestParseSeverity:
    """Name -> level."""

    @pytest.mark.parametrize("level", list(CANONICAL))
    def test_round_trip(self, level):
        """parse(name(level)) gives back the level for all six levels."""
        parsed, err = parse_severity(severity_name(level))
        assert err is None
        assert parsed is level

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("debug", Severity.DEBUG),
            ("DEBUG", Severity.DEBUG),
            ("DeBuG", Severity.DEBUG),
            ("TrACE", Severity.TRACE),
            ("infO", Severity.INFO),
            ("WaRnInG", Severity.WARNING),
            ("eRrOr", Severity.ERROR),
            ("none", Severity.NONE),
        ],
    )
    def test_case_insensitive(self, text, expected):
        parsed, err = parse_severity(text)
        assert err is None
        assert parsed is expected

    @pytest.mark.parametrize("text", ["  debug", "DEBUG ", "FOO", "", "  ", "debugg", "warn", "INVALID"])
    def test_rejects_bad_input(self, text):
        """Whitespace, unknown and extended text give INVALID plus an error."""
        parsed, err = parse_severity(text)
        assert parsed is Severity.INVALID
        assert isinstance(err, InvalidSeverityError)
        assert err.text == text
        assert err.severity is Severity.INVALID

    def test_error_message_is_descriptive(self):
        _, err = parse_severity("FOO")
        assert "FOO" in str(err)
        assert "WARNING" in str(err)

    def test_from_string_raises(self):
        """The raising variant surfaces the same error as a ValueError."""
        assert Severity.from_string("warning") is Severity.WARNING
        with pytest.raises(ValueError, match="invalid log level"):
            Severity.from_string("verbose")


class TestSeverityOrder:
    def test_total_order(self):
        """DEBUG < TRACE < INFO < WARNING < ERROR < NONE."""
        ordered = [Severity.DEBUG, Severity.TRACE, Severity.INFO, Severity.WARNING, Severity.ERROR, Severity.NONE]
        assert ordered == sorted(ordered)
        for lower, higher in zip(ordered, ordered[1:]):
            assert lower < higher
