"""Document model and CST-to-model builder."""

from netdocpy.document.build import (
    build_document,
    build_from_tree,
    build_item,
    decode_object,
    lower_tree,
    object_label,
    parse_document,
)
from netdocpy.document.errors import (
    DocumentError,
    DocumentSyntaxError,
    ErrorKind,
    InternalInvariantError,
    InvalidBase64Error,
)
from netdocpy.document.model import Document, Item

__all__ = [
    "Document",
    "DocumentError",
    "DocumentSyntaxError",
    "ErrorKind",
    "InternalInvariantError",
    "InvalidBase64Error",
    "Item",
    "build_document",
    "build_from_tree",
    "build_item",
    "decode_object",
    "lower_tree",
    "object_label",
    "parse_document",
]
