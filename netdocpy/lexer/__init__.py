"""Lexer."""

from netdocpy.lexer.lexer import Lexer, delimiter_label, dump_tokens, token_text
from netdocpy.lexer.tokens import (
    Token,
    TokenFlags,
    TokenKind,
    Trivia,
    TriviaKind,
    TriviaPiece,
)

__all__ = [
    "Lexer",
    "Token",
    "TokenFlags",
    "TokenKind",
    "Trivia",
    "TriviaKind",
    "TriviaPiece",
    "delimiter_label",
    "dump_tokens",
    "token_text",
]
