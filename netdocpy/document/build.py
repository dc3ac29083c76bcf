"""Fold a directory document CST into `Document` / `Item` values."""

from __future__ import annotations

import base64

from netdocpy.cst import GreenNode, SyntaxNode, SyntaxToken, from_green
from netdocpy.diagnostics import PARSER_UNEXPECTED_TOKEN, Diagnostic, errors_only
from netdocpy.document.errors import (
    DocumentSyntaxError,
    InternalInvariantError,
    InvalidBase64Error,
)
from netdocpy.document.model import Document, Item
from netdocpy.lexer import delimiter_label
from netdocpy.parser import ParseMode, ParsedGreenTree, ParserOptions, parse
from netdocpy.syntax import NetdocSyntaxKind

_OBJECT_FRAME_TOKENS: frozenset[NetdocSyntaxKind] = frozenset(
    {
        NetdocSyntaxKind.BEGIN_DELIMITER,
        NetdocSyntaxKind.END_DELIMITER,
        NetdocSyntaxKind.NEWLINE,
    }
)


def parse_document(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Document:
    """Parse `text` into a `Document`.

    Raises `DocumentSyntaxError` or `InvalidBase64Error` for bad input; the
    first error wins and no partial document is returned.
    """
    parsed = parse(text, options=options, mode=mode)
    return build_from_tree(parsed, text)


def build_from_tree(parsed: ParsedGreenTree, source: str) -> Document:
    errors = errors_only(parsed.diagnostics)
    if errors:
        raise DocumentSyntaxError(errors, source)
    return build_document(from_green(parsed.root, source))


def lower_tree(root: GreenNode, source: str = "") -> Document:
    return build_document(from_green(root, source))


def build_document(root: SyntaxNode) -> Document:
    """Build from a red `ROOT` or `DOCUMENT` node, keeping item order."""
    document = root
    if root.kind == NetdocSyntaxKind.ROOT:
        found = root.first_child_node(NetdocSyntaxKind.DOCUMENT)
        if found is None:
            raise InternalInvariantError("Syntax root has no DOCUMENT node")
        document = found

    if document.kind != NetdocSyntaxKind.DOCUMENT:
        raise InternalInvariantError(f"Expected DOCUMENT node, got {document.kind.name}")

    item_list = document.first_child_node(NetdocSyntaxKind.ITEM_LIST)
    if item_list is None:
        raise InternalInvariantError("DOCUMENT node has no ITEM_LIST")

    items: list[Item] = []
    for child in item_list.children:
        if isinstance(child, SyntaxToken):
            raise InternalInvariantError(f"Unexpected {child.kind.name} token in ITEM_LIST")

        if child.kind == NetdocSyntaxKind.ERROR:
            raise DocumentSyntaxError((_error_node_diagnostic(child),), child.source)

        items.append(build_item(child, index=len(items)))

    return Document(items=tuple(items))


def build_item(node: SyntaxNode, index: int = 0) -> Item:
    if node.kind != NetdocSyntaxKind.ITEM:
        raise InternalInvariantError(f"Expected ITEM node, got {node.kind.name}")

    children = node.children
    if not children or len(children) > 2:
        raise InternalInvariantError(f"ITEM node has {len(children)} children, expected 1 or 2")

    keyword_line = children[0]
    if not isinstance(keyword_line, SyntaxNode) or keyword_line.kind != NetdocSyntaxKind.KEYWORD_LINE:
        raise InternalInvariantError(f"ITEM must start with KEYWORD_LINE, got {keyword_line.kind.name}")

    keyword_token = keyword_line.first_child_token(NetdocSyntaxKind.KEYWORD)
    if keyword_token is None:
        raise InternalInvariantError("KEYWORD_LINE has no KEYWORD token")

    keyword = keyword_token.text
    arguments = tuple(
        token.text for token in keyword_line.child_tokens() if token.kind == NetdocSyntaxKind.ARGUMENT
    )

    if len(children) == 1:
        return Item(keyword=keyword, arguments=arguments)

    object_node = children[1]
    if not isinstance(object_node, SyntaxNode) or object_node.kind != NetdocSyntaxKind.OBJECT:
        raise InternalInvariantError(f"Second ITEM child must be OBJECT, got {object_node.kind.name}")

    return Item(
        keyword=keyword,
        arguments=arguments,
        object=decode_object(object_node, item_index=index, keyword=keyword),
        object_label=object_label(object_node),
    )


def object_label(node: SyntaxNode) -> str:
    begin = node.first_child_token(NetdocSyntaxKind.BEGIN_DELIMITER)
    if begin is None:
        raise InternalInvariantError("OBJECT node has no BEGIN delimiter")
    return delimiter_label(begin.text)


def decode_object(
    node: SyntaxNode,
    *,
    item_index: int | None = None,
    keyword: str | None = None,
) -> bytes:
    """Decode the payload lines of an `OBJECT` node.

    Line terminators are dropped; any other whitespace stays in the payload
    and makes it invalid. `item_index` and `keyword` default to the owning
    `ITEM` when the node has one.
    """
    if node.kind != NetdocSyntaxKind.OBJECT:
        raise InternalInvariantError(f"Expected OBJECT node, got {node.kind.name}")

    if item_index is None or keyword is None:
        owner_index, owner_keyword = _owning_item(node)
        item_index = owner_index if item_index is None else item_index
        keyword = owner_keyword if keyword is None else keyword

    def invalid(reason: str) -> InvalidBase64Error:
        return InvalidBase64Error(item_index=item_index, keyword=keyword, range=node.range, reason=reason)

    parts: list[str] = []
    for child in node.children:
        if isinstance(child, SyntaxToken):
            if child.kind not in _OBJECT_FRAME_TOKENS:
                raise InternalInvariantError(f"Unexpected {child.kind.name} token in OBJECT")
            continue

        if child.kind != NetdocSyntaxKind.BASE64_LINE:
            raise InternalInvariantError(f"Unexpected {child.kind.name} node in OBJECT")

        for token in child.child_tokens():
            if token.kind == NetdocSyntaxKind.NEWLINE:
                continue
            if token.has_trivia:
                raise invalid("whitespace inside payload line")
            parts.append(token.text)

    payload = "".join(parts)
    try:
        decoded = base64.b64decode(payload, validate=True)
    except ValueError as exc:
        raise invalid(str(exc)) from exc

    # Reject excess padding and non-zero trailing bits.
    if len(payload) % 4 != 0 or base64.b64encode(decoded).decode("ascii") != payload:
        raise invalid("payload is not canonical padded base64")
    return decoded


def _owning_item(node: SyntaxNode) -> tuple[int, str]:
    parent = node.parent
    if parent is None or parent.kind != NetdocSyntaxKind.ITEM:
        return 0, ""

    keyword_line = parent.first_child_node(NetdocSyntaxKind.KEYWORD_LINE)
    keyword_token = keyword_line.first_child_token(NetdocSyntaxKind.KEYWORD) if keyword_line else None
    return parent.index_in_parent, keyword_token.text if keyword_token is not None else ""


def _error_node_diagnostic(node: SyntaxNode) -> Diagnostic:
    return Diagnostic(
        code=PARSER_UNEXPECTED_TOKEN.code,
        message=f"Unparsable line: {node.text.strip()!r}",
        range=node.range,
        severity=PARSER_UNEXPECTED_TOKEN.severity,
        category=PARSER_UNEXPECTED_TOKEN.category,
    )


__all__ = [
    "build_document",
    "build_from_tree",
    "build_item",
    "decode_object",
    "lower_tree",
    "object_label",
    "parse_document",
]
