# fmtstyle

Parsing and formatting pieces for `{}`-style format strings, plus a few small
building blocks for logging code. Plain Python, no third-party dependencies.

## Modules

- `fmtstyle.format_spec`: `parse_format_specs` turns one specifier such as
  `*^10.3f` into a `FormatSpecs` dataclass (fill, `Alignment`, sign, `alt`,
  width, precision, type, and `width_ref` / `precision_ref` for nested
  `{}` arguments). `parse_nonnegative_int` parses one number. Invalid input
  raises `FormatError`, which is a subclass of `ValueError`.
- `fmtstyle.format_parser`: `parse_format_string` splits a format string into
  `TextSegment` and `ReplacementField` items. `{{` and `}}` become literal
  braces. Each field carries an `ArgRef`, which is automatic, by index or by
  name, together with its parsed `FormatSpecs`. `parse_arg_id` parses one
  argument id.
- `fmtstyle.writer`: integer and padding writers. `count_digits`,
  `format_decimal` (with an optional thousands separator), `format_uint`
  (binary, octal or hex), `format_int`, `write_padded` and `write_int`.
  `write_int` supports the types `d x X b B o n`.
- `fmtstyle.value_formatter`: `format_value` formats a single value according
  to a `FormatSpecs`. It handles integers, booleans (`true`/`false`, or a
  number when a type is given), floats (`g G e E f F a A`, with `nan`/`inf`
  handling), strings, and any other object through `str()`. `check_specs`
  rejects specifiers that do not suit the value. `format_string` and
  `format_float` are also available.
- `fmtstyle.fmt_helper`: zero-padding helpers `pad2`, `pad3`, `pad6`, `pad9`,
  `pad_uint` and `count_digits`. `time_fraction` gives the sub-second part of
  a nanosecond timestamp in a chosen unit.
- `fmtstyle.circular_q`: `CircularQueue`, a fixed-capacity queue. When it is
  full, `push_back` drops the oldest item and increments `overrun_counter`.

## Examples

```python
from fmtstyle.format_spec import parse_format_specs
from fmtstyle.value_formatter import format_value
from fmtstyle.writer import write_int, write_padded

format_value(3.14159, parse_format_specs("08.2f"))   # '00003.14'
format_value(-5, parse_format_specs("+05"))          # '-0005'
format_value("hello", parse_format_specs(".3"))      # 'hel'
write_int(1234567, parse_format_specs("n"))          # '1,234,567'
write_int(255, parse_format_specs("#x"))             # '0xff'
write_padded("hi", parse_format_specs("*^6"))        # '**hi**'

format_value("abc", parse_format_specs("d"))         # raises FormatError
```

```python
from fmtstyle.format_parser import parse_format_string

parse_format_string("Hello {0:>5}!{{")
# [TextSegment(text='Hello '),
#  ReplacementField(arg=ArgRef(index=0, name=None), specs=FormatSpecs(...), spec='>5'),
#  TextSegment(text='!{')]
```

```python
from fmtstyle.circular_q import CircularQueue

q = CircularQueue(2)
for item in ("a", "b", "c"):
    q.push_back(item)
q.overrun_counter   # 1
q.pop_front()       # 'b'
```

```python
from fmtstyle.fmt_helper import pad2, pad3, pad9, time_fraction

pad2(7), pad3(42), pad9(1234)
# ('07', '042', '000001234')
time_fraction(1_500_123_456, 1_000_000)   # 500 (milliseconds)
```

## What it does not do

The package has no single call that fills a whole format string with
arguments. You parse the string with `parse_format_string`, look up each
field's argument yourself (which also resolves `width_ref` and
`precision_ref`), and pass it to `format_value`. The package also has no clock,
time-zone, file, process or terminal helpers, and it provides no logger.

## Installing

```
pip install .
```

Run the tests with:

```
pip install .[test]
pytest
```