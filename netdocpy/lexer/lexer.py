"""Lexer."""

import re
from typing import Final

from netdocpy.lexer.tokens import Token, TokenFlags, TokenKind
from netdocpy.text import TextRange, TextSize, slice_text_range

# A delimiter line may only be followed by horizontal whitespace before the
# line ends; the label backtracks so `X-----` never swallows the closing dashes.
_DELIMITER_LINE: Final[re.Pattern[str]] = re.compile(
    r"-----(BEGIN|END) ([A-Za-z0-9-]+(?: [A-Za-z0-9-]+)*)-----(?=[ \t]*\r?\Z)"
)
_DELIMITER_TOKEN: Final[re.Pattern[str]] = re.compile(r"-----(?:BEGIN|END) (.*)-----")


class Lexer:
    """Lossless, line-aware lexer for directory documents."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._position = 0
        self._after_newline = True
        self._current_start = TextSize.from_int(0)
        self._current_kind = TokenKind.EOF
        self._current_flags = TokenFlags.NONE

    @property
    def source(self) -> str:
        return self._source

    @property
    def current(self) -> TokenKind:
        return self._current_kind

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(self._current_start, TextSize.from_int(self._position))

    @property
    def current_flags(self) -> TokenFlags:
        return self._current_flags

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def next_token(self) -> Token:
        self._current_start = TextSize.from_int(self._position)
        self._current_flags = TokenFlags.NONE

        if self.is_eof:
            self._current_kind = TokenKind.EOF
            return Token(TokenKind.EOF, TextRange.empty(self._current_start))

        at_line_start = self._after_newline
        kind = self._lex_token()
        if at_line_start:
            self._current_flags |= TokenFlags.PRECEDING_LINE_BREAK

        if kind == TokenKind.NEWLINE:
            self._after_newline = True
        elif not kind.is_trivia:
            self._after_newline = False

        self._current_kind = kind
        return Token(kind, self.current_range, self._current_flags)

    def lex(self) -> list[Token]:
        tokens: list[Token] = []
        while True:
            token = self.next_token()
            tokens.append(token)
            if token.kind == TokenKind.EOF:
                break
        return tokens

    def _lex_token(self) -> TokenKind:
        ch = self._current_char()

        if ch == "\n":
            self._advance(1)
            return TokenKind.NEWLINE

        if ch == "\r" and self._peek_char() == "\n":
            self._advance(2)
            self._current_flags |= TokenFlags.CRLF
            return TokenKind.NEWLINE

        if ch == " " or ch == "\t":
            self._consume_whitespaces()
            return TokenKind.WHITESPACE

        if ch == "-" and self._at_line_start():
            delimiter = self._lex_delimiter()
            if delimiter is not None:
                return delimiter

        return self._lex_word()

    def _lex_delimiter(self) -> TokenKind | None:
        line_end = self._source.find("\n", self._position)
        if line_end == -1:
            line_end = len(self._source)

        match = _DELIMITER_LINE.match(self._source, self._position, line_end)
        if match is None:
            return None

        self._position = match.end()
        return TokenKind.BEGIN_DELIMITER if match.group(1) == "BEGIN" else TokenKind.END_DELIMITER

    def _lex_word(self) -> TokenKind:
        while not self.is_eof:
            ch = self._current_char()
            if ch == " " or ch == "\t" or ch == "\n":
                break
            if ch == "\r" and self._peek_char() == "\n":
                break
            self._advance(1)
        return TokenKind.WORD

    def _consume_whitespaces(self) -> None:
        while not self.is_eof:
            ch = self._current_char()
            if ch != " " and ch != "\t":
                break
            self._advance(1)

    def _at_line_start(self) -> bool:
        return self._position == 0 or self._source[self._position - 1] == "\n"

    def _current_char(self) -> str:
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return ""
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def delimiter_label(text: str) -> str:
    """Label of a BEGIN/END delimiter token, e.g. `RSA PUBLIC KEY`."""
    match = _DELIMITER_TOKEN.fullmatch(text)
    if match is None:
        raise ValueError(f"Not an object delimiter: {text!r}")
    return match.group(1)


def token_text(source: str, token: Token) -> str:
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def dump_tokens(tokens: list[Token], source: str) -> None:
    """Print token list with kind, range, flags, and text for debugging."""
    for i, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{i:03d} {tok.kind.name:<16} range={tok.range.as_tuple()} flags={tok.flags!r} text={text!r}")
