"""Token source that hides whitespace trivia and records it separately."""

from netdocpy.lexer import Lexer, TokenFlags, TokenKind, Trivia
from netdocpy.lexer.tokens import trivia_kind_from_token_kind
from netdocpy.text import TextRange, TextSize


class TokenSource:
    """Bridge between lexer and parser.

    Whitespace after a token on the same line trails that token; whitespace
    that opens a line leads the next token.
    """

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._trivia: list[Trivia] = []
        self._current_kind: TokenKind = TokenKind.EOF
        self._current_range: TextRange = TextRange.empty(TextSize.from_int(0))
        self._current_flags: TokenFlags = TokenFlags.NONE
        self._current_has_preceding_trivia = False
        self._next_non_trivia_token(trailing=False)

    @property
    def current(self) -> TokenKind:
        return self._current_kind

    @property
    def current_range(self) -> TextRange:
        return self._current_range

    @property
    def current_flags(self) -> TokenFlags:
        return self._current_flags

    @property
    def text(self) -> str:
        return self._lexer.source

    @property
    def position(self) -> TextSize:
        return self._current_range.start

    @property
    def has_preceding_line_break(self) -> bool:
        return bool(self._current_flags & TokenFlags.PRECEDING_LINE_BREAK)

    @property
    def has_preceding_trivia(self) -> bool:
        return self._current_has_preceding_trivia

    @property
    def trivia(self) -> list[Trivia]:
        return self._trivia

    def bump(self) -> None:
        if self._current_kind != TokenKind.EOF:
            self._next_non_trivia_token(trailing=self._current_kind != TokenKind.NEWLINE)

    def finish(self) -> list[Trivia]:
        return self._trivia

    def _next_non_trivia_token(self, trailing: bool) -> None:
        saw_trivia = False

        while True:
            token = self._lexer.next_token()

            if token.kind.is_trivia:
                saw_trivia = True
                self._trivia.append(Trivia(trivia_kind_from_token_kind(token.kind), token.range, trailing))
                continue

            self._current_kind = token.kind
            self._current_range = token.range
            self._current_flags = token.flags
            self._current_has_preceding_trivia = saw_trivia
            break
