import pytest

from netdocpy.diagnostics import Diagnostic, format_diagnostic
from netdocpy.text import LineIndex, TextRange, TextSize, slice_text_range


def test_text_range_rejects_inverted_bounds():
    with pytest.raises(ValueError):
        TextRange(3, 1)
    with pytest.raises(ValueError):
        TextSize(-1)


def test_text_range_basics():
    rng = TextRange.new(TextSize(2), TextSize(5))
    assert rng.len() == TextSize(3)
    assert rng.as_tuple() == (2, 5)
    assert not rng.is_empty()
    assert TextRange.empty(TextSize.of("abc")).as_tuple() == (3, 3)
    assert slice_text_range("a bcd\n", rng) == "bcd"


def test_line_index_maps_offsets_to_one_based_positions():
    source = "a b\r\nsecond\n\nlast"
    lines = LineIndex(source)

    assert lines.line_col(TextSize(0)) == (1, 1)
    assert lines.line_col(TextSize(2)) == (1, 3)
    assert lines.line_col(TextSize(5)) == (2, 1)
    assert lines.line_col(TextSize(12)) == (3, 1)
    assert lines.line_col(TextSize(len(source))) == (4, 5)


def test_line_index_line_range_excludes_newline():
    source = "one\ntwo\n"
    lines = LineIndex(source)

    assert slice_text_range(source, lines.line_range(1)) == "one"
    assert slice_text_range(source, lines.line_range(2)) == "two"
    assert lines.line_range(3).is_empty()
    with pytest.raises(ValueError):
        lines.line_range(4)


def test_format_diagnostic_uses_line_and_column():
    source = "a\nb_c\n"
    diagnostic = Diagnostic(
        code="PARSER_INVALID_KEYWORD",
        message="Keyword may only contain letters, digits and `-`",
        range=TextRange(2, 5),
        hint="rename it",
    )
    rendered = format_diagnostic(diagnostic, LineIndex(source))
    assert rendered == "2:1: error PARSER_INVALID_KEYWORD Keyword may only contain letters, digits and `-` (rename it)"
