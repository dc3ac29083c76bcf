"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum, IntFlag

from netdocpy.text import TextRange, TextSize


class TokenKind(IntEnum):
    EOF = 1

    # Trivia (recorded by the token source, hidden from grammar routines)
    WHITESPACE = 10

    # Significant: every keyword, delimiter and payload line ends in one.
    NEWLINE = 11

    # Maximal run of characters other than space, tab and newline.
    WORD = 20

    # Whole `-----BEGIN <label>-----` / `-----END <label>-----` lines,
    # only recognised at the start of a line.
    BEGIN_DELIMITER = 30
    END_DELIMITER = 31

    @property
    def is_trivia(self) -> bool:
        return self == TokenKind.WHITESPACE


class TriviaKind(IntEnum):
    WHITESPACE = 1


def trivia_kind_from_token_kind(kind: TokenKind) -> TriviaKind:
    match kind:
        case TokenKind.WHITESPACE:
            return TriviaKind.WHITESPACE
        case _:
            raise ValueError(f"Not a trivia token kind: {kind!r}")


class TokenFlags(IntFlag):
    NONE = 0
    PRECEDING_LINE_BREAK = 1 << 0  # first token on its line (whitespace aside)
    CRLF = 1 << 1  # NEWLINE spelled `\r\n`


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    range: TextRange
    flags: TokenFlags = TokenFlags.NONE

    def has_preceding_line_break(self) -> bool:
        return bool(self.flags & TokenFlags.PRECEDING_LINE_BREAK)

    def is_crlf(self) -> bool:
        return bool(self.flags & TokenFlags.CRLF)


@dataclass(frozen=True, slots=True)
class Trivia:
    """Parser-side trivia: a range plus whether it trails the previous token."""

    kind: TriviaKind
    range: TextRange
    trailing: bool


@dataclass(frozen=True, slots=True)
class TriviaPiece:
    """Tree-side trivia: kind and length only."""

    kind: TriviaKind
    length: TextSize
