"""Parser for directory protocol "item" documents."""

from netdocpy.document import (
    Document,
    DocumentError,
    DocumentSyntaxError,
    ErrorKind,
    InternalInvariantError,
    InvalidBase64Error,
    Item,
    build_document,
    build_from_tree,
    parse_document,
)
from netdocpy.parser import ParseMode, ParserOptions, parse, parse_result

__all__ = [
    "Document",
    "DocumentError",
    "DocumentSyntaxError",
    "ErrorKind",
    "InternalInvariantError",
    "InvalidBase64Error",
    "Item",
    "ParseMode",
    "ParserOptions",
    "build_document",
    "build_from_tree",
    "parse",
    "parse_document",
    "parse_result",
]
