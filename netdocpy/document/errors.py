"""Error taxonomy for document building."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import ClassVar

from netdocpy.diagnostics import BUILDER_INVALID_BASE64, Diagnostic, format_diagnostic
from netdocpy.text import LineIndex, TextRange


class ErrorKind(StrEnum):
    SYNTAX = "syntax"
    INVALID_BASE64 = "invalid_base64"
    INTERNAL_INVARIANT = "internal_invariant"


class DocumentError(Exception):
    """Input text could not be turned into a `Document`."""

    kind: ClassVar[ErrorKind]


class DocumentSyntaxError(DocumentError):
    """The text does not follow the item grammar.

    Carries every error diagnostic of the parse; `line` and `column` point at
    the first one when the source text is known.
    """

    kind = ErrorKind.SYNTAX

    def __init__(self, diagnostics: Sequence[Diagnostic], source: str = "") -> None:
        self.diagnostics: tuple[Diagnostic, ...] = tuple(diagnostics)
        self.line: int | None = None
        self.column: int | None = None

        if not self.diagnostics:
            super().__init__("Invalid document syntax")
            return

        first = self.diagnostics[0]
        if source:
            lines = LineIndex(source)
            self.line, self.column = lines.line_col(first.range.start)
            message = format_diagnostic(first, lines)
        else:
            message = f"{first.code} {first.message} at {first.range.as_tuple()}"

        if len(self.diagnostics) > 1:
            message += f" (+{len(self.diagnostics) - 1} more)"
        super().__init__(message)

    @property
    def first(self) -> Diagnostic | None:
        return self.diagnostics[0] if self.diagnostics else None


class InvalidBase64Error(DocumentError):
    """An object block is well formed but its payload does not decode."""

    kind = ErrorKind.INVALID_BASE64

    def __init__(self, *, item_index: int, keyword: str, range: TextRange, reason: str) -> None:
        self.item_index = item_index
        self.keyword = keyword
        self.range = range
        self.reason = reason
        super().__init__(f"Item {item_index} (`{keyword}`): invalid base64 object at {range.as_tuple()}: {reason}")

    @property
    def diagnostic(self) -> Diagnostic:
        return Diagnostic(
            code=BUILDER_INVALID_BASE64.code,
            message=f"{BUILDER_INVALID_BASE64.message}: {self.reason}",
            range=self.range,
            severity=BUILDER_INVALID_BASE64.severity,
            category=BUILDER_INVALID_BASE64.category,
        )


class InternalInvariantError(RuntimeError):
    """The syntax tree has a shape the grammar never produces.

    Signals a parser bug rather than bad input, so it is not a `DocumentError`.
    """

    kind: ClassVar[ErrorKind] = ErrorKind.INTERNAL_INVARIANT
