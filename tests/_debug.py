"""Shared debug printers for lexer/parser/document tests."""

from __future__ import annotations

import os

from netdocpy.cst import GreenNode, GreenToken
from netdocpy.diagnostics import Diagnostic
from netdocpy.document import Document
from netdocpy.lexer import Token, token_text

PRINT_TOKENS = os.getenv("PRINT_TOKENS", "0").lower() in {"1", "true", "yes", "on"}
PRINT_CST = os.getenv("PRINT_CST", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DOCUMENT = os.getenv("PRINT_DOCUMENT", "0").lower() in {"1", "true", "yes", "on"}
PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        text = token_text(source, tok)
        print(f"{index:03d} {tok.kind.name:<16} range={tok.range.as_tuple()} flags={tok.flags} text={text!r}")


def debug_dump_cst(test_name: str, source: str, root: GreenNode) -> None:
    if not PRINT_CST:
        return
    if not PRINT_SOURCE:
        print(f"\n===== {test_name} SOURCE =====")
        print(source)
    else:
        debug_print_source(test_name, source)
    print(f"===== {test_name} CST =====")
    print(dump_cst(root))


def debug_dump_document(test_name: str, document: Document, source: str | None = None) -> None:
    if not PRINT_DOCUMENT:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"\n===== {test_name} DOCUMENT =====")
    for index, item in enumerate(document):
        line = f"{index:03d} {item.keyword} args={list(item.arguments)}"
        if item.object is not None:
            line += f" object={item.object_label!r} bytes={len(item.object)}"
        print(line)


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic], source: str | None = None) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(diagnostic)


def dump_cst(node: GreenNode) -> str:
    lines: list[str] = []

    def walk_node(current: GreenNode, depth: int) -> None:
        indent = "  " * depth
        lines.append(f"{indent}{current.kind.name}")
        for child in current.children:
            if isinstance(child, GreenNode):
                walk_node(child, depth + 1)
            else:
                walk_token(child, depth + 1)

    def walk_token(token: GreenToken, depth: int) -> None:
        indent = "  " * depth
        text = token.text.replace("\n", "\\n").replace("\r", "\\r")
        lines.append(
            f"{indent}{token.kind.name} text={text!r} "
            f"leading={len(token.leading_trivia)} trailing={len(token.trailing_trivia)}"
        )

    walk_node(node, 0)
    return "\n".join(lines)
