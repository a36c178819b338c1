"""Tests for path pattern parsing."""

import pytest

from tq.errors import ParseErrorKind, PatternParseError
from tq.query import FieldStep, IndexStep, Pattern, parse_pattern


def test_empty_pattern_has_no_steps() -> None:
    assert parse_pattern("") == Pattern()
    assert parse_pattern("   ").steps == ()


def test_dotted_fields_parse_in_order() -> None:
    pattern = parse_pattern("package.metadata.docs")

    assert pattern.steps == (
        FieldStep(name="package"),
        FieldStep(name="metadata"),
        FieldStep(name="docs"),
    )


def test_bracket_indices_follow_their_field() -> None:
    pattern = parse_pattern("tbl[0][1].name")

    assert pattern.steps == (
        FieldStep(name="tbl"),
        IndexStep(index=0),
        IndexStep(index=1),
        FieldStep(name="name"),
    )


def test_bare_keys_accept_digits_dashes_and_underscores() -> None:
    pattern = parse_pattern("dev-dependencies.serde_json.0")

    assert [step.name for step in pattern.steps] == [
        "dev-dependencies",
        "serde_json",
        "0",
    ]


def test_quoted_keys_are_taken_literally() -> None:
    pattern = parse_pattern('servers."alpha.example.com"[2]')

    assert pattern.steps == (
        FieldStep(name="servers"),
        FieldStep(name="alpha.example.com"),
        IndexStep(index=2),
    )


def test_quoted_keys_unescape_quotes_and_backslashes() -> None:
    pattern = parse_pattern(r'"say \"hi\""."back\\slash"."\n"')

    assert [step.name for step in pattern.steps] == [
        'say "hi"',
        "back\\slash",
        "\\n",
    ]


def test_quoted_keys_keep_inner_whitespace_and_may_be_empty() -> None:
    pattern = parse_pattern('" spaced key ".""')

    assert [step.name for step in pattern.steps] == [" spaced key ", ""]


def test_surrounding_whitespace_is_trimmed() -> None:
    assert parse_pattern("  a.b  ") == parse_pattern("a.b")


def test_negative_index_is_parsed() -> None:
    assert parse_pattern("a[-1]").steps[1] == IndexStep(index=-1)


@pytest.mark.parametrize(
    ("text", "kind", "offset"),
    [
        ("a[", ParseErrorKind.UNTERMINATED_BRACKET, 1),
        ("a[0", ParseErrorKind.UNTERMINATED_BRACKET, 1),
        ("a[x]", ParseErrorKind.INVALID_INDEX, 2),
        ("a[1x]", ParseErrorKind.INVALID_INDEX, 3),
        ("a[]", ParseErrorKind.INVALID_INDEX, 2),
        ("a[-]", ParseErrorKind.INVALID_INDEX, 3),
        ("a[*]", ParseErrorKind.INVALID_INDEX, 2),
        ("a..b", ParseErrorKind.EMPTY_IDENTIFIER, 2),
        (".a", ParseErrorKind.EMPTY_IDENTIFIER, 0),
        ("[0]", ParseErrorKind.EMPTY_IDENTIFIER, 0),
        ("a.", ParseErrorKind.TRAILING_DOT, 1),
        ('a."b', ParseErrorKind.UNTERMINATED_QUOTE, 2),
        ('"a\\"', ParseErrorKind.UNTERMINATED_QUOTE, 0),
        ("a b", ParseErrorKind.UNEXPECTED_CHARACTER, 1),
        ("a.*", ParseErrorKind.UNEXPECTED_CHARACTER, 2),
        ("a[0]b", ParseErrorKind.UNEXPECTED_CHARACTER, 4),
    ],
)
def test_malformed_patterns_report_kind_and_offset(
    text: str, kind: ParseErrorKind, offset: int
) -> None:
    with pytest.raises(PatternParseError) as excinfo:
        parse_pattern(text)

    assert excinfo.value.kind is kind
    assert excinfo.value.offset == offset
    assert excinfo.value.pattern == text


def test_offsets_are_relative_to_untrimmed_text() -> None:
    with pytest.raises(PatternParseError) as excinfo:
        parse_pattern("   a.")

    assert excinfo.value.offset == 4


def test_offsets_count_utf8_bytes() -> None:
    with pytest.raises(PatternParseError) as excinfo:
        parse_pattern('"é" x')

    assert excinfo.value.kind is ParseErrorKind.UNEXPECTED_CHARACTER
    assert excinfo.value.offset == 4


def test_parse_error_is_a_value_error_with_caret() -> None:
    with pytest.raises(ValueError, match="unterminated bracket at byte 3"):
        parse_pattern("abc[")

    try:
        parse_pattern("abc[")
    except PatternParseError as exc:
        assert exc.caret() == "abc[\n   ^ unterminated bracket"


def test_undecodable_argv_bytes_count_as_single_bytes() -> None:
    with pytest.raises(PatternParseError) as excinfo:
        parse_pattern('"\udcff" x')

    assert excinfo.value.kind is ParseErrorKind.UNEXPECTED_CHARACTER
    assert excinfo.value.offset == 3
    assert excinfo.value.caret() == '"�" x\n   ^ unexpected character'
