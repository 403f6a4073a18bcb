"""Helpers for zero-padding integers and splitting timestamps."""

from __future__ import annotations

NANOS_PER_SECOND = 1_000_000_000


def count_digits(n: int) -> int:
    """Number of decimal digits in a non-negative integer (1 for zero)."""
    if n < 0:
        raise ValueError("count_digits expects a non-negative integer")
    return len(str(n))


def pad2(n: int) -> str:
    """Format an integer with at least two digits."""
    if n > 99:
        return str(n)
    if n >= 0:
        return f"{n:02d}"
    return f"{n:02}"


def pad_uint(n: int, width: int) -> str:
    """Left-pad a non-negative integer with zeros up to ``width`` digits."""
    if n < 0:
        raise ValueError("pad_uint expects a non-negative integer")
    digits = count_digits(n)
    if width > digits:
        return "0" * (width - digits) + str(n)
    return str(n)


def pad3(n: int) -> str:
    return pad_uint(n, 3)


def pad6(n: int) -> str:
    return pad_uint(n, 6)


def pad9(n: int) -> str:
    return pad_uint(n, 9)


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def time_fraction(timestamp_ns: int, unit_ns: int) -> int:
    """Sub-second part of a timestamp, counted in units of ``unit_ns``.

    For example, with ``unit_ns=1_000_000`` this returns the milliseconds
    within the current second.
    """
    if unit_ns <= 0:
        raise ValueError("unit_ns must be positive")
    secs = _trunc_div(timestamp_ns, NANOS_PER_SECOND)
    return _trunc_div(timestamp_ns, unit_ns) - _trunc_div(secs * NANOS_PER_SECOND, unit_ns)