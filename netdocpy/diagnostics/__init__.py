"""Diagnostics."""

from netdocpy.diagnostics.codes import (
    BUILDER_INVALID_BASE64,
    PARSER_CRLF_LINE_ENDING,
    PARSER_CRLF_LINE_ENDING_TOLERATED,
    PARSER_EMPTY_LINE,
    PARSER_INVALID_KEYWORD,
    PARSER_LEADING_WHITESPACE,
    PARSER_MISMATCHED_OBJECT_LABEL,
    PARSER_MISMATCHED_OBJECT_LABEL_TOLERATED,
    PARSER_MISSING_NEWLINE,
    PARSER_ORPHAN_OBJECT,
    PARSER_TRAILING_WHITESPACE,
    PARSER_TRAILING_WHITESPACE_TOLERATED,
    PARSER_UNEXPECTED_TOKEN,
    PARSER_UNMATCHED_END,
    PARSER_UNTERMINATED_OBJECT,
    DiagnosticSpec,
)
from netdocpy.diagnostics.diagnostic import Diagnostic, Severity
from netdocpy.diagnostics.report import (
    errors_only,
    format_diagnostic,
    has_errors,
)

__all__ = [
    "BUILDER_INVALID_BASE64",
    "PARSER_CRLF_LINE_ENDING",
    "PARSER_CRLF_LINE_ENDING_TOLERATED",
    "PARSER_EMPTY_LINE",
    "PARSER_INVALID_KEYWORD",
    "PARSER_LEADING_WHITESPACE",
    "PARSER_MISMATCHED_OBJECT_LABEL",
    "PARSER_MISMATCHED_OBJECT_LABEL_TOLERATED",
    "PARSER_MISSING_NEWLINE",
    "PARSER_ORPHAN_OBJECT",
    "PARSER_TRAILING_WHITESPACE",
    "PARSER_TRAILING_WHITESPACE_TOLERATED",
    "PARSER_UNEXPECTED_TOKEN",
    "PARSER_UNMATCHED_END",
    "PARSER_UNTERMINATED_OBJECT",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "errors_only",
    "format_diagnostic",
    "has_errors",
]
