"""Low-level writers for integers and padded text.

These functions turn numbers into digit strings and apply the width, fill
and alignment of a :class:`fmtstyle.format_spec.FormatSpecs`.
"""

from __future__ import annotations

from fmtstyle.format_spec import Alignment, FormatError, FormatSpecs

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"

# Thousands separator used by the ``n`` presentation type (classic locale).
DEFAULT_THOUSANDS_SEP = ","


def count_digits(n: int) -> int:
    """Number of decimal digits in a non-negative integer (1 for zero)."""
    if n < 0:
        raise ValueError("count_digits expects a non-negative integer")
    return len(str(n))


def format_decimal(value: int, thousands_sep: str = "") -> str:
    """Decimal digits of a non-negative integer.

    If ``thousands_sep`` is not empty it is inserted between every group of
    three digits, counting from the right.
    """
    if value < 0:
        raise ValueError("format_decimal expects a non-negative integer")
    digits = str(value)
    if not thousands_sep:
        return digits
    head_len = len(digits) % 3 or 3
    groups = [digits[:head_len]]
    groups.extend(digits[start:start + 3] for start in range(head_len, len(digits), 3))
    return thousands_sep.join(groups)


def format_uint(value: int, base_bits: int, upper: bool = False) -> str:
    """Digits of a non-negative integer in base ``2 ** base_bits``.

    ``base_bits`` is 1 (binary), 3 (octal) or 4 (hexadecimal); ``upper``
    selects upper-case hexadecimal letters.
    """
    if value < 0:
        raise ValueError("format_uint expects a non-negative integer")
    if not 1 <= base_bits <= 4:
        raise ValueError("base_bits must be between 1 and 4")
    alphabet = _UPPER_DIGITS if upper else _LOWER_DIGITS
    mask = (1 << base_bits) - 1
    out = []
    while True:
        out.append(alphabet[value & mask])
        value >>= base_bits
        if value == 0:
            break
    return "".join(reversed(out))


def format_int(value: int) -> str:
    """Signed decimal representation of an integer."""
    if value < 0:
        return "-" + format_decimal(-value)
    return format_decimal(value)


def write_padded(text: str, specs: FormatSpecs) -> str:
    """Pad ``text`` to the specification's width with its fill character.

    Text is left-aligned unless the alignment is right or centre; text
    already as wide as the width is returned unchanged.
    """
    width = specs.width
    size = len(text)
    if width <= size:
        return text
    padding = width - size
    fill = specs.fill
    if specs.align is Alignment.RIGHT:
        return fill * padding + text
    if specs.align is Alignment.CENTER:
        left = padding // 2
        return fill * left + text + fill * (padding - left)
    return text + fill * padding


def _pad_int(digits: str, prefix: str, specs: FormatSpecs) -> str:
    """Lay out ``<prefix><numeric padding><digits>`` and pad the result."""
    num_digits = len(digits)
    size = len(prefix) + num_digits
    fill = specs.fill
    padding = 0
    precision = specs.precision if specs.precision is not None else -1
    if specs.align is Alignment.NUMERIC:
        if specs.width > size:
            padding = specs.width - size
    elif precision > num_digits:
        padding = precision - num_digits
        fill = "0"
    body = prefix + fill * padding + digits
    align = Alignment.RIGHT if specs.align is Alignment.DEFAULT else specs.align
    outer = FormatSpecs(fill=specs.fill, align=align, width=specs.width)
    return write_padded(body, outer)


def write_int(value: int, specs: FormatSpecs) -> str:
    """Format an integer according to a format specification.

    Supported types are ``d`` (or none), ``x``, ``X``, ``b``, ``B``, ``o``
    and ``n``; any other type raises :class:`FormatError`.
    """
    negative = value < 0
    abs_value = -value if negative else value
    if negative:
        prefix = "-"
    elif specs.has_sign():
        prefix = specs.sign
    else:
        prefix = ""

    kind = specs.type
    if kind in ("", "d"):
        digits = format_decimal(abs_value)
    elif kind in ("x", "X"):
        if specs.alt:
            prefix += "0" + kind
        digits = format_uint(abs_value, 4, kind != "x")
    elif kind in ("b", "B"):
        if specs.alt:
            prefix += "0" + kind
        digits = format_uint(abs_value, 1)
    elif kind == "o":
        digits = format_uint(abs_value, 3)
        precision = specs.precision if specs.precision is not None else -1
        # The octal prefix counts as a digit, so it is only added when the
        # precision does not already supply leading zeros.
        if specs.alt and precision <= len(digits):
            prefix += "0"
    elif kind == "n":
        digits = format_decimal(abs_value, DEFAULT_THOUSANDS_SEP)
    else:
        raise FormatError("invalid type specifier")
    return _pad_int(digits, prefix, specs)