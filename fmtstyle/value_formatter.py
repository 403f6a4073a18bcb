"""Formatting of single values according to a parsed format specification.

Integers, booleans, floats and strings are formatted the way the format
language defines for them. Any other object is formatted as its ``str()``.
"""

from __future__ import annotations

import math
from typing import Any

from fmtstyle.format_spec import Alignment, FormatError, FormatSpecs
from fmtstyle.writer import write_int, write_padded

_INT_TYPES = frozenset({"", "d", "x", "X", "b", "B", "o", "n"})

# Presentation type -> printf conversion used to render the digits.
_FLOAT_TYPES = {
    "": "g",
    "g": "g",
    "G": "G",
    "e": "e",
    "E": "E",
    "f": "f",
    "F": "F",
    "a": "a",
    "A": "A",
}
_UPPER_FLOAT_TYPES = frozenset({"G", "E", "F", "A"})

_STRING_TYPES = frozenset({"", "s"})


def _arg_kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    return "custom"


def check_specs(specs: FormatSpecs, value: Any) -> None:
    """Check that a specification suits the type of ``value``.

    Raises :class:`FormatError` for flags that need a numeric or signed
    argument, for a precision given to an integer, and for a presentation
    type the value does not support. Objects without a standard
    presentation are not checked.
    """
    kind = _arg_kind(value)
    if kind == "custom":
        return
    numeric = kind in ("int", "bool", "float")
    integral = kind in ("int", "bool")

    def require_numeric() -> None:
        if not numeric:
            raise FormatError("format specifier requires numeric argument")

    if specs.align is Alignment.NUMERIC:
        require_numeric()
    if specs.sign:
        require_numeric()
        if kind == "bool":
            raise FormatError("format specifier requires signed argument")
    if specs.alt:
        require_numeric()
    if (specs.precision is not None or specs.precision_ref is not None) and integral:
        raise FormatError("precision not allowed for this argument type")

    if integral:
        valid = specs.type in _INT_TYPES
    elif kind == "float":
        valid = specs.type in _FLOAT_TYPES
    else:
        valid = specs.type in _STRING_TYPES
    if not valid:
        raise FormatError("invalid type specifier")


def format_string(value: str, specs: FormatSpecs) -> str:
    """Format a string: truncate to the precision, then pad to the width."""
    if specs.type not in _STRING_TYPES:
        raise FormatError("invalid type specifier")
    text = value
    if specs.precision is not None and specs.precision < len(text):
        text = text[:specs.precision]
    return write_padded(text, specs)


def _hex_float(value: float, precision: int | None, alt: bool) -> str:
    """Hexadecimal representation of a non-negative finite float."""
    mantissa, exponent = value.hex()[2:].split("p")
    lead, _, frac = mantissa.partition(".")
    if precision is None:
        frac = frac.rstrip("0")
    elif precision < len(frac):
        full = int(lead + frac, 16)
        unit = 16 ** (len(frac) - precision)
        scaled, rem = divmod(full, unit)
        half = unit // 2
        if rem > half or (rem == half and scaled % 2):
            scaled += 1
        digits = f"{scaled:0{precision + 1}x}"
        split = len(digits) - precision
        lead, frac = digits[:split], digits[split:]
    else:
        frac = frac.ljust(precision, "0")
    point = "." + frac if frac or alt else ""
    return f"0x{lead}{point}p{int(exponent):+d}"


def _render_digits(value: float, conversion: str, specs: FormatSpecs) -> str:
    if conversion in ("a", "A"):
        text = _hex_float(value, specs.precision, specs.alt)
        return text.upper() if conversion == "A" else text
    pattern = "%"
    if specs.alt:
        pattern += "#"
    if specs.precision is not None:
        pattern += f".{specs.precision}"
    pattern += conversion
    return pattern % value


def format_float(value: float, specs: FormatSpecs) -> str:
    """Format a floating-point number.

    The default presentation is the general (``g``) format. NaN and
    infinity are written as ``nan`` and ``inf`` (upper case for the
    upper-case types), padded without changing the alignment.
    """
    kind = specs.type
    if kind not in _FLOAT_TYPES:
        raise FormatError("invalid type specifier")
    conversion = _FLOAT_TYPES[kind]
    upper = kind in _UPPER_FLOAT_TYPES
    value = float(value)

    sign = ""
    if math.copysign(1.0, value) < 0:
        sign = "-"
        value = -value
    elif specs.has_sign():
        sign = specs.sign

    if math.isnan(value):
        return write_padded(sign + ("NAN" if upper else "nan"), specs)
    if math.isinf(value):
        return write_padded(sign + ("INF" if upper else "inf"), specs)

    digits = _render_digits(value, conversion, specs)
    if specs.align is Alignment.NUMERIC:
        width = specs.width
        if sign and width:
            width -= 1
        inner = FormatSpecs(fill=specs.fill, align=Alignment.RIGHT, width=width)
        return sign + write_padded(digits, inner)
    align = Alignment.RIGHT if specs.align is Alignment.DEFAULT else specs.align
    outer = FormatSpecs(fill=specs.fill, align=align, width=specs.width)
    return write_padded(sign + digits, outer)


def format_value(value: Any, specs: FormatSpecs) -> str:
    """Check the specification against ``value`` and format it."""
    check_specs(specs, value)
    kind = _arg_kind(value)
    if kind == "bool":
        if specs.type:
            return write_int(1 if value else 0, specs)
        return format_string("true" if value else "false", specs)
    if kind == "int":
        return write_int(value, specs)
    if kind == "float":
        return format_float(value, specs)
    if kind == "string":
        return format_string(value, specs)
    return format_string(str(value), specs)