"""Immutable green CST."""

from dataclasses import dataclass
from typing import TypeAlias

from netdocpy.lexer import TriviaPiece
from netdocpy.syntax import NetdocSyntaxKind
from netdocpy.text import TextSize


@dataclass(frozen=True, slots=True)
class GreenToken:
    kind: NetdocSyntaxKind
    text: str
    leading_trivia: tuple[TriviaPiece, ...]
    trailing_trivia: tuple[TriviaPiece, ...]

    @property
    def text_len(self) -> TextSize:
        total = len(self.text)
        for piece in self.leading_trivia:
            total += piece.length.value
        for piece in self.trailing_trivia:
            total += piece.length.value
        return TextSize.from_int(total)


@dataclass(frozen=True, slots=True)
class GreenNode:
    kind: NetdocSyntaxKind
    children: tuple["GreenElement", ...]

    @property
    def text_len(self) -> TextSize:
        total = 0
        for child in self.children:
            total += child.text_len.value
        return TextSize.from_int(total)


GreenElement: TypeAlias = GreenNode | GreenToken


class TreeBuilder:
    """Stack-based builder; emits one ROOT node wrapping everything."""

    def __init__(self) -> None:
        self._stack: list[tuple[NetdocSyntaxKind, list[GreenElement]]] = []
        self._roots: list[GreenElement] = []

    def start_node(self, kind: NetdocSyntaxKind) -> None:
        self._stack.append((kind, []))

    def token_with_trivia(
        self,
        kind: NetdocSyntaxKind,
        text: str,
        leading: tuple[TriviaPiece, ...],
        trailing: tuple[TriviaPiece, ...],
    ) -> None:
        self._push_element(
            GreenToken(
                kind=kind,
                text=text,
                leading_trivia=leading,
                trailing_trivia=trailing,
            )
        )

    def finish_node(self) -> None:
        if not self._stack:
            raise RuntimeError("finish_node called with empty builder stack")

        kind, children = self._stack.pop()
        self._push_element(GreenNode(kind=kind, children=tuple(children)))

    def finish(self) -> GreenNode:
        if self._stack:
            raise RuntimeError("Cannot finish tree: unclosed nodes remain on stack")

        return GreenNode(kind=NetdocSyntaxKind.ROOT, children=tuple(self._roots))

    def _push_element(self, element: GreenElement) -> None:
        if self._stack:
            self._stack[-1][1].append(element)
            return
        self._roots.append(element)
