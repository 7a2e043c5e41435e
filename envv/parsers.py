"""
envv/parsers.py
String → typed value parsers, one per supported target type.

Every parser takes the raw string exactly as read from the store and raises
ValueError with a short reason on failure. The accessor layer wraps that
into ParseError with the variable name attached.

Accepted forms are deliberately narrower than Python's builtins: no
surrounding whitespace, no digit-group underscores.
"""

from __future__ import annotations

import re
from datetime import timedelta

_INT_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

_TRUE = frozenset({"1", "t", "true"})
_FALSE = frozenset({"0", "f", "false"})


def parse_string(raw: str) -> str:
    return raw


def parse_int(raw: str) -> int:
    """Base-10 signed integer: ``42``, ``-7``, ``+3``."""
    if not _INT_RE.fullmatch(raw):
        raise ValueError("invalid syntax")
    return int(raw, 10)


def parse_bool(raw: str) -> bool:
    """Case-insensitive ``1/t/true`` and ``0/f/false``."""
    low = raw.lower()
    if low in _TRUE:
        return True
    if low in _FALSE:
        return False
    raise ValueError("invalid syntax")


def parse_float(raw: str) -> float:
    """64-bit float literal. Finite literals that overflow are rejected."""
    if not _FLOAT_RE.fullmatch(raw):
        raise ValueError("invalid syntax")
    value = float(raw)
    if value in (float("inf"), float("-inf")) and "inf" not in raw.lower():
        raise ValueError("value out of range")
    return value


# ── Duration ───────────────────────────────────────────────────────────────

_NS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_DURATION_PART_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def parse_duration(raw: str) -> timedelta:
    """Sequence of ``<number><unit>`` pairs: ``300ms``, ``-1.5h``, ``2h45m``.

    Units: ns, us (µs), ms, s, m, h. The bare literal ``0`` is accepted.
    The result has microsecond resolution; nanoseconds are rounded.
    """
    s = raw
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError("invalid duration")

    total_ns = 0
    pos = 0
    while pos < len(s):
        m = _DURATION_PART_RE.match(s, pos)
        whole, frac, unit = m.group(1), m.group(2), m.group(3)
        if not whole and not frac:
            # "." alone or no digits at all
            raise ValueError("invalid duration")
        if not unit:
            raise ValueError("missing unit in duration")
        if unit not in _NS_PER_UNIT:
            raise ValueError(f"unknown unit {unit!r} in duration")
        scale = _NS_PER_UNIT[unit]
        total_ns += int(whole or "0") * scale
        if frac:
            total_ns += int(frac) * scale // 10 ** len(frac)
        pos = m.end()

    micros, rem = divmod(total_ns, 1000)
    if rem >= 500:
        micros += 1
    return timedelta(microseconds=-micros if negative else micros)


def format_duration(value: timedelta) -> str:
    """Inverse of parse_duration for display: ``1h30m0s``, ``500ms``."""
    micros = (value.days * 86400 + value.seconds) * 1_000_000 + value.microseconds
    if micros == 0:
        return "0s"
    sign = "-" if micros < 0 else ""
    micros = abs(micros)
    if micros < 1_000_000:
        if micros % 1000 == 0:
            return f"{sign}{micros // 1000}ms"
        return f"{sign}{micros}us"

    hours, rest = divmod(micros, 3600 * 1_000_000)
    minutes, rest = divmod(rest, 60 * 1_000_000)
    seconds, frac = divmod(rest, 1_000_000)
    sec = str(seconds)
    if frac:
        sec += "." + f"{frac:06d}".rstrip("0")
    out = ""
    if hours:
        out += f"{hours}h"
    if hours or minutes:
        out += f"{minutes}m"
    return f"{sign}{out}{sec}s"
