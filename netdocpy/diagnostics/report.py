"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from netdocpy.diagnostics.diagnostic import Diagnostic
from netdocpy.text import LineIndex


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def errors_only(diagnostics: Iterable[Diagnostic]) -> list[Diagnostic]:
    return [d for d in diagnostics if d.severity == "error"]


def format_diagnostic(diagnostic: Diagnostic, lines: LineIndex) -> str:
    """One-line `line:col: severity CODE message` rendering."""
    line, column = lines.line_col(diagnostic.range.start)
    text = f"{line}:{column}: {diagnostic.severity} {diagnostic.code} {diagnostic.message}"
    if diagnostic.hint:
        text += f" ({diagnostic.hint})"
    return text
