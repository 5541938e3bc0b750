"""
Tests for the small helpers: slice conversion, random data, diff suppression.
"""

import random

import pytest
from terrakit_core.conv import interface_slice_to_int_slice, interface_slice_to_string_slice
from terrakit_core.rand import (
    ALPHANUMERIC,
    DIGIT,
    LOWER,
    SPECIAL,
    UPPER,
    WHITESPACE,
    int_array_unique,
    random_string,
)
from terrakit_core.validation.diff_suppress import diff_suppress_string_ignore_case


class TestSliceConversion:
    @pytest.mark.parametrize("n", [0, 1, 37])
    def test_same_length(self, n):
        assert len(interface_slice_to_int_slice([None] * n)) == n
        assert len(interface_slice_to_string_slice([None] * n)) == n

    def test_non_ints_become_zero(self):
        """Values that are not ints (including bools and numeric strings) map to 0."""
        assert interface_slice_to_int_slice([1, "2", None, 3.5, True, -4]) == [1, 0, 0, 0, 0, -4]

    def test_non_strings_become_empty(self):
        assert interface_slice_to_string_slice(["a", 1, None, b"b", ""]) == ["a", "", "", "", ""]

    def test_accepts_any_iterable(self):
        assert interface_slice_to_int_slice(iter((5, 6))) == [5, 6]


class TestRandomString:
    @pytest.mark.parametrize("n", [0, 1, 25])
    def test_length(self, n):
        assert len(random_string(n, LOWER)) == n

    @pytest.mark.parametrize("alphabet", [LOWER, UPPER, DIGIT, WHITESPACE, SPECIAL, ALPHANUMERIC])
    def test_characters_from_alphabet(self, alphabet):
        """Every character comes from the requested alphabet."""
        assert set(random_string(40, alphabet)) <= set(alphabet)

    @pytest.mark.parametrize("n,alphabet", [(-1, "abc"), (-100, "abc"), (0, ""), (100, ""), (-1, "")])
    def test_bad_arguments(self, n, alphabet):
        with pytest.raises(ValueError):
            random_string(n, alphabet)

    def test_seeded_rng_is_deterministic(self):
        assert random_string(12, LOWER, rng=random.Random(7)) == random_string(12, LOWER, rng=random.Random(7))


class TestIntArrayUnique:
    @pytest.mark.parametrize("n", [0, 1, 25])
    def test_permutation(self, n):
        values = int_array_unique(n)
        assert len(values) == n
        assert sorted(values) == list(range(n))

    @pytest.mark.parametrize("n", [-1, -10])
    def test_negative_length(self, n):
        with pytest.raises(ValueError):
            int_array_unique(n)


class TestDiffSuppressStringIgnoreCase:
    @pytest.mark.parametrize(
        "old,new,expected",
        [
            ("", "", True),
            ("", "foo", False),
            ("foo", "", False),
            ("foo", "foo", True),
            ("FOO", "FOO", True),
            ("Foo", "foo", True),
            ("foo", "bar", False),
            ("Straße", "STRASSE", False),
            ("ΣΊΣΥΦΟΣ", "σίσυφος", True),
            ("foo", "foox", False),
        ],
    )
    def test_cases(self, old, new, expected):
        # key and resource data are ignored
        assert diff_suppress_string_ignore_case("", old, new, None) is expected
