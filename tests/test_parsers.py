"""
tests/test_parsers.py
Tests for envv/parsers.py — string → typed value parsing.

Covers:
  - int: sign handling, rejection of whitespace / underscores / decimals
  - bool: case-insensitive literal set
  - float: decimal, exponent, inf/nan, overflow
  - duration: unit pairs, fractions, sign, malformed input
  - format_duration display form
"""

import math
from datetime import timedelta

import pytest

from envv.parsers import (
    format_duration,
    parse_bool,
    parse_duration,
    parse_float,
    parse_int,
    parse_string,
)


def test_string_is_identity():
    assert parse_string("") == ""
    assert parse_string("  a=b  ") == "  a=b  "


# ══════════════════════════════════════════════════════════════════════════════
#  INT
# ══════════════════════════════════════════════════════════════════════════════

class TestParseInt:

    @pytest.mark.parametrize("raw,expected", [
        ("42", 42), ("-7", -7), ("+3", 3), ("0", 0), ("007", 7),
        ("123456789012345678901234567890", 123456789012345678901234567890),
    ])
    def test_valid(self, raw, expected):
        assert parse_int(raw) == expected

    @pytest.mark.parametrize("raw", [
        "", " 42", "42 ", "1_000", "4.2", "0x1f", "abc", "--1", "+", "١٢",
    ])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_int(raw)


# ══════════════════════════════════════════════════════════════════════════════
#  BOOL
# ══════════════════════════════════════════════════════════════════════════════

class TestParseBool:

    @pytest.mark.parametrize("raw", ["1", "t", "T", "true", "True", "TRUE", "tRuE"])
    def test_true(self, raw):
        assert parse_bool(raw) is True

    @pytest.mark.parametrize("raw", ["0", "f", "F", "false", "False", "FALSE"])
    def test_false(self, raw):
        assert parse_bool(raw) is False

    @pytest.mark.parametrize("raw", ["", "yes", "no", "on", "2", " true", "truee"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_bool(raw)


# ══════════════════════════════════════════════════════════════════════════════
#  FLOAT
# ══════════════════════════════════════════════════════════════════════════════

class TestParseFloat:

    @pytest.mark.parametrize("raw,expected", [
        ("3.14", 3.14), ("-2", -2.0), (".5", 0.5), ("5.", 5.0),
        ("1e3", 1000.0), ("2.5E-2", 0.025), ("+1", 1.0),
    ])
    def test_valid(self, raw, expected):
        assert parse_float(raw) == expected

    def test_infinity_and_nan(self):
        assert parse_float("inf") == math.inf
        assert parse_float("-Infinity") == -math.inf
        assert math.isnan(parse_float("NaN"))

    @pytest.mark.parametrize("raw", ["", " 1.0", "1_0.5", "1.2.3", "e5", "abc", "."])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_float(raw)

    def test_overflow_is_rejected(self):
        with pytest.raises(ValueError, match="out of range"):
            parse_float("1e400")


# ══════════════════════════════════════════════════════════════════════════════
#  DURATION
# ══════════════════════════════════════════════════════════════════════════════

class TestParseDuration:

    @pytest.mark.parametrize("raw,expected", [
        ("1h30m", timedelta(minutes=90)),
        ("500ms", timedelta(milliseconds=500)),
        ("90s", timedelta(seconds=90)),
        ("2h45m30.5s", timedelta(hours=2, minutes=45, seconds=30.5)),
        ("1.5h", timedelta(minutes=90)),
        (".5s", timedelta(milliseconds=500)),
        ("-1.5h", -timedelta(minutes=90)),
        ("+10m", timedelta(minutes=10)),
        ("250us", timedelta(microseconds=250)),
        ("250µs", timedelta(microseconds=250)),
        ("250μs", timedelta(microseconds=250)),
        ("1500ns", timedelta(microseconds=2)),
        ("0", timedelta(0)),
        ("-0", timedelta(0)),
        ("0s", timedelta(0)),
        ("1m1m", timedelta(minutes=2)),
    ])
    def test_valid(self, raw, expected):
        assert parse_duration(raw) == expected

    @pytest.mark.parametrize("raw", [
        "", "-", "10", "h", "5x", "1d", "1h30", ".s", "1 h", " 1h", "1h ", "1..5s", "+-1s",
    ])
    def test_invalid(self, raw):
        with pytest.raises(ValueError):
            parse_duration(raw)

    def test_unknown_unit_is_named(self):
        with pytest.raises(ValueError, match="'d'"):
            parse_duration("3d")


class TestFormatDuration:

    @pytest.mark.parametrize("value,expected", [
        (timedelta(minutes=90), "1h30m0s"),
        (timedelta(milliseconds=500), "500ms"),
        (timedelta(microseconds=250), "250us"),
        (timedelta(seconds=1.5), "1.5s"),
        (timedelta(0), "0s"),
        (-timedelta(seconds=5), "-5s"),
        (timedelta(minutes=2, seconds=3), "2m3s"),
    ])
    def test_format(self, value, expected):
        assert format_duration(value) == expected

    @pytest.mark.parametrize("raw", ["1h30m", "45s", "2h0m5.25s"])
    def test_parses_back(self, raw):
        value = parse_duration(raw)
        assert parse_duration(format_duration(value)) == value
