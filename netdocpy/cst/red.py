"""Red CST wrappers: absolute offsets and parent links over green elements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from netdocpy.cst.green import GreenNode
from netdocpy.lexer import TriviaKind, TriviaPiece
from netdocpy.syntax import NetdocSyntaxKind
from netdocpy.text import TextRange


@dataclass(frozen=True, slots=True)
class SyntaxTriviaPiece:
    kind: TriviaKind
    text: str


class SyntaxToken:
    __slots__ = (
        "kind",
        "text",
        "leading_trivia",
        "trailing_trivia",
        "parent",
        "index_in_parent",
        "_source",
        "_start",
        "_token_start",
        "_token_end",
        "_end",
    )

    def __init__(
        self,
        *,
        kind: NetdocSyntaxKind,
        text: str,
        leading_pieces: tuple[TriviaPiece, ...],
        trailing_pieces: tuple[TriviaPiece, ...],
        parent: SyntaxNode,
        index_in_parent: int,
        source: str,
        start: int,
    ) -> None:
        self.kind = kind
        self.text = text
        self.parent = parent
        self.index_in_parent = index_in_parent
        self._source = source
        self._start = start

        self._token_start = start + sum(piece.length.value for piece in leading_pieces)
        self._token_end = self._token_start + len(text)
        self._end = self._token_end + sum(piece.length.value for piece in trailing_pieces)

        # Without source text the pieces keep their kinds but not their text.
        self.leading_trivia = _build_trivia(source, self._start, leading_pieces)
        self.trailing_trivia = _build_trivia(source, self._token_end, trailing_pieces)

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def token_start(self) -> int:
        return self._token_start

    @property
    def token_end(self) -> int:
        return self._token_end

    @property
    def token_range(self) -> TextRange:
        return TextRange(self._token_start, self._token_end)

    @property
    def has_trivia(self) -> bool:
        return bool(self.leading_trivia) or bool(self.trailing_trivia)

    @property
    def text_with_trivia(self) -> str:
        if not self._source:
            return self.text
        return self._source[self._start : self._end]

    @property
    def leading_trivia_text(self) -> str:
        return "".join(piece.text for piece in self.leading_trivia)

    @property
    def trailing_trivia_text(self) -> str:
        return "".join(piece.text for piece in self.trailing_trivia)

    def __repr__(self) -> str:
        return f"SyntaxToken({self.kind.name}, {self.text!r}, {self._token_start}..{self._token_end})"


class SyntaxNode:
    __slots__ = (
        "kind",
        "parent",
        "index_in_parent",
        "_children",
        "_source",
        "_start",
        "_end",
    )

    def __init__(
        self,
        *,
        kind: NetdocSyntaxKind,
        parent: SyntaxNode | None,
        index_in_parent: int,
        source: str,
        start: int,
    ) -> None:
        self.kind = kind
        self.parent = parent
        self.index_in_parent = index_in_parent
        self._source = source
        self._start = start
        self._end = start
        self._children: tuple[SyntaxElement, ...] = ()

    @property
    def start(self) -> int:
        return self._start

    @property
    def end(self) -> int:
        return self._end

    @property
    def range(self) -> TextRange:
        return TextRange(self._start, self._end)

    @property
    def source(self) -> str:
        """Full document text the tree was built over, or `""`."""
        return self._source

    @property
    def text(self) -> str:
        if self._source:
            return self._source[self._start : self._end]
        return "".join(token.text for token in self.descendants_tokens())

    @property
    def children(self) -> tuple[SyntaxElement, ...]:
        return self._children

    def child_nodes(self) -> tuple[SyntaxNode, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxNode))

    def child_tokens(self) -> tuple[SyntaxToken, ...]:
        return tuple(child for child in self._children if isinstance(child, SyntaxToken))

    def first_child_node(self, kind: NetdocSyntaxKind) -> SyntaxNode | None:
        for child in self._children:
            if isinstance(child, SyntaxNode) and child.kind == kind:
                return child
        return None

    def first_child_token(self, kind: NetdocSyntaxKind) -> SyntaxToken | None:
        for child in self._children:
            if isinstance(child, SyntaxToken) and child.kind == kind:
                return child
        return None

    def descendants_tokens(self) -> tuple[SyntaxToken, ...]:
        tokens: list[SyntaxToken] = []

        def walk(node: SyntaxNode) -> None:
            for child in node.children:
                if isinstance(child, SyntaxToken):
                    tokens.append(child)
                else:
                    walk(child)

        walk(self)
        return tuple(tokens)

    def __repr__(self) -> str:
        return f"SyntaxNode({self.kind.name}, {self._start}..{self._end})"


SyntaxElement: TypeAlias = SyntaxNode | SyntaxToken


def from_green(root: GreenNode, source: str = "") -> SyntaxNode:
    red_root, _ = _build_node(
        green=root,
        parent=None,
        index_in_parent=0,
        source=source,
        start=0,
    )
    return red_root


def _build_node(
    *,
    green: GreenNode,
    parent: SyntaxNode | None,
    index_in_parent: int,
    source: str,
    start: int,
) -> tuple[SyntaxNode, int]:
    node = SyntaxNode(
        kind=green.kind,
        parent=parent,
        index_in_parent=index_in_parent,
        source=source,
        start=start,
    )

    current = start
    children: list[SyntaxElement] = []
    for child_index, child in enumerate(green.children):
        if isinstance(child, GreenNode):
            red_child, current = _build_node(
                green=child,
                parent=node,
                index_in_parent=child_index,
                source=source,
                start=current,
            )
            children.append(red_child)
            continue

        token = SyntaxToken(
            kind=child.kind,
            text=child.text,
            leading_pieces=child.leading_trivia,
            trailing_pieces=child.trailing_trivia,
            parent=node,
            index_in_parent=child_index,
            source=source,
            start=current,
        )
        children.append(token)
        current = token.end

    node._children = tuple(children)
    node._end = current
    return node, current


def _build_trivia(
    source: str,
    start: int,
    pieces: tuple[TriviaPiece, ...],
) -> tuple[SyntaxTriviaPiece, ...]:
    out: list[SyntaxTriviaPiece] = []
    offset = start
    for piece in pieces:
        piece_end = offset + piece.length.value
        out.append(SyntaxTriviaPiece(kind=piece.kind, text=source[offset:piece_end] if source else ""))
        offset = piece_end
    return tuple(out)
