import pytest

from fmtstyle.format_parser import (
    ArgRef,
    ReplacementField,
    TextSegment,
    parse_arg_id,
    parse_format_string,
)
from fmtstyle.format_spec import Alignment, FormatError, FormatSpecs, parse_format_specs


def test_parse_arg_id_automatic():
    ref, pos = parse_arg_id("}", 0)
    assert ref == ArgRef()
    assert ref.is_auto
    assert pos == 0


def test_parse_arg_id_automatic_before_colon():
    ref, pos = parse_arg_id("a:x}", 1)
    assert ref.is_auto
    assert pos == 1


def test_parse_arg_id_index():
    ref, pos = parse_arg_id("12}", 0)
    assert ref == ArgRef(index=12)
    assert not ref.is_auto
    assert pos == 2


def test_parse_arg_id_name():
    ref, pos = parse_arg_id("name_1:>5}", 0)
    assert ref == ArgRef(name="name_1")
    assert pos == len("name_1")


def test_parse_arg_id_index_not_followed_by_brace():
    with pytest.raises(FormatError, match="invalid format string"):
        parse_arg_id("1a}", 0)


@pytest.mark.parametrize("text", ["-}", "!}", " }", ""])
def test_parse_arg_id_invalid(text):
    with pytest.raises(FormatError, match="invalid format string"):
        parse_arg_id(text, 0)


def test_parse_arg_id_too_big():
    with pytest.raises(FormatError, match="number is too big"):
        parse_arg_id("99999999999}", 0)


def test_empty_format_string():
    assert parse_format_string("") == []


def test_plain_text():
    assert parse_format_string("Hello logger") == [TextSegment("Hello logger")]


def test_auto_field():
    assert parse_format_string("Hello logger: msg number {}") == [
        TextSegment("Hello logger: msg number "),
        ReplacementField(),
    ]


def test_indexed_and_named_fields():
    segments = parse_format_string("{0} and {name}")
    assert segments == [
        ReplacementField(arg=ArgRef(index=0)),
        TextSegment(" and "),
        ReplacementField(arg=ArgRef(name="name")),
    ]


def test_escaped_braces_are_collapsed_and_merged():
    assert parse_format_string("{{x}}") == [TextSegment("{x}")]


def test_escaped_braces_around_field():
    segments = parse_format_string("{{{}}}")
    assert segments == [TextSegment("{"), ReplacementField(), TextSegment("}")]


def test_field_with_spec():
    segments = parse_format_string("{:<16} Elapsed")
    field = segments[0]
    assert isinstance(field, ReplacementField)
    assert field.arg.is_auto
    assert field.spec == "<16"
    assert field.specs == parse_format_specs("<16")
    assert field.specs.align is Alignment.LEFT
    assert segments[1] == TextSegment(" Elapsed")


def test_field_with_precision_and_type():
    segments = parse_format_string("{0:0.2f} secs")
    field = segments[0]
    assert field.arg == ArgRef(index=0)
    assert field.specs == parse_format_specs("0.2f")
    assert field.specs.type == "f"


def test_empty_spec_gives_default_specs():
    segments = parse_format_string("{:}")
    assert segments == [ReplacementField(specs=FormatSpecs(), spec="")]


def test_dynamic_width_in_spec():
    segments = parse_format_string("{:{}}")
    field = segments[0]
    assert field.spec == "{}"
    assert field.specs.width_ref is ...


def test_named_dynamic_width_and_precision():
    segments = parse_format_string("{x:{w}.{p}f}!")
    field = segments[0]
    assert field.arg == ArgRef(name="x")
    assert field.specs.width_ref == "w"
    assert field.specs.precision_ref == "p"
    assert segments[1] == TextSegment("!")


def test_text_segments_round_trip():
    source = "a {} b {1} c {name:>4} d"
    segments = parse_format_string(source)
    texts = [s.text for s in segments if isinstance(s, TextSegment)]
    assert texts == ["a ", " b ", " c ", " d"]
    assert sum(isinstance(s, ReplacementField) for s in segments) == 3


def test_unmatched_closing_brace():
    with pytest.raises(FormatError, match="unmatched '}' in format string"):
        parse_format_string("abc } def")


def test_trailing_open_brace():
    with pytest.raises(FormatError, match="invalid format string"):
        parse_format_string("abc {")


def test_missing_closing_brace_after_name():
    with pytest.raises(FormatError, match="missing '}' in format string"):
        parse_format_string("{name")


def test_unterminated_spec():
    with pytest.raises(FormatError, match="unknown format specifier"):
        parse_format_string("{:<5")


def test_invalid_fill_character():
    with pytest.raises(FormatError, match="invalid fill character"):
        parse_format_string("{:{<5}")


def test_invalid_spec_is_reported():
    with pytest.raises(FormatError, match="missing precision specifier"):
        parse_format_string("{:.}")


def test_invalid_arg_id_character():
    with pytest.raises(FormatError, match="invalid format string"):
        parse_format_string("{-1}")