#!/usr/bin/env python3
"""Print the items, tokens or CST of a directory document file."""

from __future__ import annotations

import argparse
from pathlib import Path
import sys

from netdocpy.cst import GreenNode
from netdocpy.diagnostics import format_diagnostic
from netdocpy.document import InvalidBase64Error
from netdocpy.lexer import Lexer, dump_tokens
from netdocpy.parser import ParseMode, parse_result
from netdocpy.text import LineIndex, slice_text_range


def format_cst(node: GreenNode) -> str:
    lines: list[str] = []

    def walk(current: GreenNode, depth: int) -> None:
        indent = "  " * depth
        lines.append(f"{indent}{current.kind.name}")
        for child in current.children:
            if isinstance(child, GreenNode):
                walk(child, depth + 1)
                continue
            text = child.text.replace("\n", "\\n").replace("\r", "\\r")
            lines.append(f"{indent}  {child.kind.name} {text!r}")

    walk(node, 0)
    return "\n".join(lines)


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump a parsed directory document")
    parser.add_argument("path", type=Path, help="Document file to read (UTF-8)")
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in ParseMode],
        default=ParseMode.STRICT.value,
        help="Parser mode (default: strict)",
    )
    parser.add_argument("--tokens", action="store_true", help="Dump lexer tokens")
    parser.add_argument("--cst", action="store_true", help="Dump the concrete syntax tree")
    args = parser.parse_args()

    path: Path = args.path
    if not path.is_file():
        raise SystemExit(f"Not a file: {path}")
    text = path.read_text(encoding="utf-8")

    if args.tokens:
        dump_tokens(Lexer(text).lex(), text)

    result = parse_result(text, mode=ParseMode(args.mode))
    if args.cst:
        print(format_cst(result.green_root()))

    lines = LineIndex(text)
    for diagnostic in result.diagnostics:
        print(f"{path}:{format_diagnostic(diagnostic, lines)}", file=sys.stderr)
        line, _ = lines.line_col(diagnostic.range.start)
        print(f"    {slice_text_range(text, lines.line_range(line))!r}", file=sys.stderr)

    error = result.error()
    if isinstance(error, InvalidBase64Error):
        print(f"{path}:{format_diagnostic(error.diagnostic, lines)}", file=sys.stderr)
    if error is not None:
        print(f"{path}: {error.kind.value} error: {error}", file=sys.stderr)
        return 1

    for index, item in enumerate(result.document()):
        line = f"[{index}] {item.keyword}"
        if item.arguments:
            line += " " + " ".join(item.arguments)
        if item.object is not None:
            line += f"  <{item.object_label}: {len(item.object)} bytes>"
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
