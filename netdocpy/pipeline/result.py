"""Parse-once carrier with lazy syntax tree and document accessors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from netdocpy.cst import from_green
from netdocpy.diagnostics import errors_only, has_errors
from netdocpy.document import Document, DocumentError, DocumentSyntaxError, build_document
from netdocpy.parser.options import ParserOptions
from netdocpy.parser.tree_sink import ParsedGreenTree

if TYPE_CHECKING:
    from netdocpy.cst import GreenNode, SyntaxNode
    from netdocpy.diagnostics import Diagnostic


@dataclass(slots=True)
class ParseResultBase:
    """Shared parse carrier for parse-once/consume-many workflows."""

    source_text: str
    parsed: ParsedGreenTree

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    def green_root(self) -> GreenNode:
        return self.parsed.root


@dataclass(slots=True)
class NetdocParseResult(ParseResultBase):
    """Directory document parse result.

    `document()` raises like `parse_document`; `error()` returns the same
    failure as a value. Both build at most once.
    """

    options: ParserOptions
    _syntax_root: SyntaxNode | None = field(default=None, init=False, repr=False)
    _document: Document | None = field(default=None, init=False, repr=False)
    _error: DocumentError | None = field(default=None, init=False, repr=False)

    def syntax_root(self) -> SyntaxNode:
        if self._syntax_root is None:
            self._syntax_root = from_green(self.parsed.root, self.source_text)
        return self._syntax_root

    def document(self) -> Document:
        outcome = self._build()
        if isinstance(outcome, DocumentError):
            raise outcome
        return outcome

    def error(self) -> DocumentError | None:
        outcome = self._build()
        return outcome if isinstance(outcome, DocumentError) else None

    @property
    def ok(self) -> bool:
        return self.error() is None

    def _build(self) -> Document | DocumentError:
        if self._document is not None:
            return self._document
        if self._error is not None:
            return self._error
        try:
            if self.has_errors:
                raise DocumentSyntaxError(errors_only(self.diagnostics), self.source_text)
            self._document = build_document(self.syntax_root())
        except DocumentError as exc:
            self._error = exc
            return exc
        return self._document
