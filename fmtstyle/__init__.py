"""Format string and specifier parsing, value formatting, padding helpers and a circular queue."""

__version__ = "0.1.0"

__all__ = [
    "circular_q",
    "fmt_helper",
    "format_spec",
    "format_parser",
    "writer",
    "value_formatter",
]