"""Splitting a format string into literal text and replacement fields.

A format string is literal text with replacement fields of the form
``{[arg_id][:spec]}``. ``{{`` and ``}}`` stand for literal braces. The
argument id is empty (the next automatic argument), a non-negative index
or a name. The specification is parsed by
:func:`fmtstyle.format_spec.parse_format_specs`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from fmtstyle.format_spec import (
    FormatError,
    FormatSpecs,
    parse_format_specs,
    parse_nonnegative_int,
)

_ALIGN_CHARS = "<>=^"


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_name_start(c: str) -> bool:
    return ("a" <= c <= "z") or ("A" <= c <= "Z") or c == "_"


@dataclass(frozen=True)
class ArgRef:
    """A reference to a formatting argument.

    With neither ``index`` nor ``name`` set it refers to the next automatic
    argument.
    """

    index: int | None = None
    name: str | None = None

    @property
    def is_auto(self) -> bool:
        return self.index is None and self.name is None


@dataclass(frozen=True)
class TextSegment:
    """Literal text, with escaped braces already collapsed."""

    text: str


@dataclass(frozen=True)
class ReplacementField:
    """A ``{...}`` field: the argument it refers to and how to format it."""

    arg: ArgRef = field(default_factory=ArgRef)
    specs: FormatSpecs = field(default_factory=FormatSpecs)
    spec: str | None = None


Segment = Union[TextSegment, ReplacementField]


def parse_arg_id(text: str, pos: int) -> tuple[ArgRef, int]:
    """Parse an argument id starting at ``pos``.

    Returns the reference and the position just after the id. An id that is
    empty (``pos`` at ``}`` or ``:``) is an automatic reference.
    """
    if pos >= len(text):
        raise FormatError("invalid format string")
    c = text[pos]
    if c in "}:":
        return ArgRef(), pos
    if _is_digit(c):
        index, pos = parse_nonnegative_int(text, pos)
        if pos >= len(text) or text[pos] not in "}:":
            raise FormatError("invalid format string")
        return ArgRef(index=index), pos
    if not _is_name_start(c):
        raise FormatError("invalid format string")
    end = pos + 1
    while end < len(text) and (_is_name_start(text[end]) or _is_digit(text[end])):
        end += 1
    return ArgRef(name=text[pos:end]), end


def _collapse_text(chunk: str) -> str:
    """Turn ``}}`` into ``}``; a lone ``}`` is an error."""
    parts = []
    pos = 0
    while True:
        brace = chunk.find("}", pos)
        if brace == -1:
            parts.append(chunk[pos:])
            return "".join(parts)
        if brace + 1 >= len(chunk) or chunk[brace + 1] != "}":
            raise FormatError("unmatched '}' in format string")
        parts.append(chunk[pos:brace + 1])
        pos = brace + 2


def _find_spec_end(text: str, pos: int) -> int:
    """Index of the ``}`` that closes a specification starting at ``pos``."""
    if (
        pos + 1 < len(text)
        and text[pos] == "{"
        and text[pos + 1] in _ALIGN_CHARS
    ):
        raise FormatError("invalid fill character '{'")
    depth = 0
    for index in range(pos, len(text)):
        c = text[index]
        if c == "{":
            depth += 1
        elif c == "}":
            if depth == 0:
                return index
            depth -= 1
    raise FormatError("unknown format specifier")


def parse_format_string(format_str: str) -> list[Segment]:
    """Split a format string into text segments and replacement fields.

    Adjacent pieces of literal text are merged into one segment.
    """
    segments: list[Segment] = []
    pending: list[str] = []

    def add_text(text: str) -> None:
        if text:
            pending.append(text)

    def add_field(replacement: ReplacementField) -> None:
        if pending:
            segments.append(TextSegment("".join(pending)))
            pending.clear()
        segments.append(replacement)

    end = len(format_str)
    pos = 0
    while pos < end:
        brace = format_str.find("{", pos)
        if brace == -1:
            add_text(_collapse_text(format_str[pos:]))
            break
        add_text(_collapse_text(format_str[pos:brace]))
        p = brace + 1
        if p == end:
            raise FormatError("invalid format string")
        c = format_str[p]
        if c == "{":
            add_text("{")
            pos = p + 1
            continue
        if c == "}":
            add_field(ReplacementField())
            pos = p + 1
            continue
        arg, p = parse_arg_id(format_str, p)
        c = format_str[p] if p < end else ""
        if c == "}":
            add_field(ReplacementField(arg=arg))
            pos = p + 1
        elif c == ":":
            spec_end = _find_spec_end(format_str, p + 1)
            spec = format_str[p + 1:spec_end]
            add_field(ReplacementField(arg=arg, specs=parse_format_specs(spec), spec=spec))
            pos = spec_end + 1
        else:
            raise FormatError("missing '}' in format string")

    if pending:
        segments.append(TextSegment("".join(pending)))
    return segments