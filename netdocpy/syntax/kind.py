"""Unified syntax kinds for parser and CST."""

from enum import IntEnum

from netdocpy.lexer import TokenKind


class NetdocSyntaxKind(IntEnum):
    """Document syntax vocabulary (tokens + nodes)."""

    TOMBSTONE = 0
    EOF = 1

    WHITESPACE = 10
    NEWLINE = 11

    # Lexer words, before grammar routines give them a role.
    WORD = 20
    KEYWORD = 21
    ARGUMENT = 22
    BASE64 = 23

    BEGIN_DELIMITER = 30
    END_DELIMITER = 31

    # Node kinds
    ROOT = 1000
    ERROR = 1001
    DOCUMENT = 1002
    ITEM_LIST = 1003
    ITEM = 1004
    KEYWORD_LINE = 1005
    OBJECT = 1006
    BASE64_LINE = 1007

    @property
    def is_trivia(self) -> bool:
        return self == NetdocSyntaxKind.WHITESPACE

    @property
    def is_token(self) -> bool:
        return self != NetdocSyntaxKind.TOMBSTONE and self.value < NetdocSyntaxKind.ROOT.value

    @property
    def is_node(self) -> bool:
        return self.value >= NetdocSyntaxKind.ROOT.value

    @staticmethod
    def from_token_kind(kind: TokenKind) -> "NetdocSyntaxKind":
        match kind:
            case TokenKind.EOF:
                return NetdocSyntaxKind.EOF
            case TokenKind.WHITESPACE:
                return NetdocSyntaxKind.WHITESPACE
            case TokenKind.NEWLINE:
                return NetdocSyntaxKind.NEWLINE
            case TokenKind.WORD:
                return NetdocSyntaxKind.WORD
            case TokenKind.BEGIN_DELIMITER:
                return NetdocSyntaxKind.BEGIN_DELIMITER
            case TokenKind.END_DELIMITER:
                return NetdocSyntaxKind.END_DELIMITER
            case _:
                raise ValueError(f"Unsupported TokenKind mapping: {kind!r}")
