import pytest

from netdocpy.lexer import Lexer, TokenFlags, TokenKind, delimiter_label, dump_tokens, token_text
from tests._debug import debug_dump_tokens
from tests._shared_cases import ALL_NETDOC_CASES, NetdocCase, case_id, case_source


def lex(text: str):
    return Lexer(text).lex()


def kinds(text: str) -> list[TokenKind]:
    return [token.kind for token in lex(text)]


def texts(text: str) -> list[str]:
    return [token_text(text, token) for token in lex(text)]


def test_keyword_line_words_whitespace_and_newline():
    src = "fingerprint AAAA BBBB\n"
    tokens = lex(src)
    debug_dump_tokens("keyword_line_words_whitespace_and_newline", src, tokens)

    assert [token.kind for token in tokens] == [
        TokenKind.WORD,
        TokenKind.WHITESPACE,
        TokenKind.WORD,
        TokenKind.WHITESPACE,
        TokenKind.WORD,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    ]
    assert texts(src) == ["fingerprint", " ", "AAAA", " ", "BBBB", "\n", ""]


def test_whitespace_runs_mix_spaces_and_tabs():
    src = "a \t b\n"
    assert texts(src) == ["a", " \t ", "b", "\n", ""]


def test_delimiter_lines_are_single_tokens():
    src = "-----BEGIN SIGNATURE-----\nAAAA\n-----END SIGNATURE-----\n"
    tokens = lex(src)
    debug_dump_tokens("delimiter_lines_are_single_tokens", src, tokens)

    assert [token.kind for token in tokens] == [
        TokenKind.BEGIN_DELIMITER,
        TokenKind.NEWLINE,
        TokenKind.WORD,
        TokenKind.NEWLINE,
        TokenKind.END_DELIMITER,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    ]
    assert token_text(src, tokens[0]) == "-----BEGIN SIGNATURE-----"
    assert token_text(src, tokens[4]) == "-----END SIGNATURE-----"


def test_multi_word_label_is_one_delimiter():
    src = case_source("multi_word_label")
    tokens = lex(src)
    begin = tokens[2]
    assert begin.kind == TokenKind.BEGIN_DELIMITER
    assert delimiter_label(token_text(src, begin)) == "RSA PUBLIC KEY"


def test_delimiter_followed_by_trailing_whitespace_keeps_whitespace_as_trivia():
    src = "-----BEGIN X-----  \n"
    assert kinds(src) == [
        TokenKind.BEGIN_DELIMITER,
        TokenKind.WHITESPACE,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    ]


def test_delimiter_not_at_line_start_is_a_word():
    src = "a -----BEGIN X-----\n"
    assert kinds(src) == [
        TokenKind.WORD,
        TokenKind.WHITESPACE,
        TokenKind.WORD,
        TokenKind.WHITESPACE,
        TokenKind.WORD,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    ]


def test_indented_delimiter_is_not_a_delimiter():
    src = " -----END X-----\n"
    assert TokenKind.END_DELIMITER not in kinds(src)


@pytest.mark.parametrize(
    "line",
    [
        "-----BEGIN X----",
        "-----BEGIN X-----extra",
        "-----BEGINX-----",
        "-----BEGIN -----",
        "-----START X-----",
        "-----BEGIN X_Y-----",
    ],
)
def test_malformed_delimiter_lines_lex_as_words(line: str):
    src = f"{line}\n"
    assert TokenKind.BEGIN_DELIMITER not in kinds(src)
    assert kinds(src)[0] == TokenKind.WORD


def test_crlf_newline_is_one_token_with_flag():
    src = "a\r\nb\n"
    tokens = lex(src)

    assert [token.kind for token in tokens] == [
        TokenKind.WORD,
        TokenKind.NEWLINE,
        TokenKind.WORD,
        TokenKind.NEWLINE,
        TokenKind.EOF,
    ]
    assert tokens[1].is_crlf()
    assert token_text(src, tokens[1]) == "\r\n"
    assert not tokens[3].is_crlf()


def test_crlf_after_delimiter_still_lexes_delimiter():
    src = "-----END X-----\r\n"
    tokens = lex(src)
    assert tokens[0].kind == TokenKind.END_DELIMITER
    assert tokens[1].is_crlf()


def test_lone_carriage_return_stays_inside_word():
    src = "a\rb\n"
    assert texts(src) == ["a\rb", "\n", ""]


def test_preceding_line_break_flag_marks_first_token_on_line():
    src = "a b\n  c\n"
    tokens = lex(src)
    words = [token for token in tokens if token.kind == TokenKind.WORD]

    assert words[0].has_preceding_line_break()
    assert not words[1].has_preceding_line_break()
    assert words[2].has_preceding_line_break()
    assert words[2].flags & TokenFlags.PRECEDING_LINE_BREAK


def test_empty_source_lexes_to_eof_only():
    tokens = lex("")
    assert len(tokens) == 1
    assert tokens[0].kind == TokenKind.EOF
    assert tokens[0].range.is_empty()


def test_non_ascii_text_is_part_of_a_word():
    src = "contact José <jose@example.org>\n"
    assert texts(src)[2] == "José"


def test_delimiter_label_rejects_non_delimiters():
    with pytest.raises(ValueError):
        delimiter_label("signature")


@pytest.mark.parametrize("case", ALL_NETDOC_CASES, ids=case_id)
def test_tokens_cover_source_without_gaps(case: NetdocCase):
    tokens = lex(case.source)
    debug_dump_tokens(case.name, case.source, tokens)

    position = 0
    for token in tokens:
        assert token.range.start.value == position
        position = token.range.end.value
    assert position == len(case.source)
    assert "".join(token_text(case.source, token) for token in tokens) == case.source


def test_dump_tokens_smoke(capsys: pytest.CaptureFixture[str]):
    src = "a\n"
    dump_tokens(lex(src), src)
    out = capsys.readouterr().out
    assert "WORD" in out
    assert "NEWLINE" in out
    assert "EOF" in out
