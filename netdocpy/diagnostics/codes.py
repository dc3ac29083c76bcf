"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_MISSING_NEWLINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_NEWLINE",
    message="Line must be terminated by a newline",
    hint="Every keyword, delimiter and payload line ends with `\\n`, including the last one.",
    category="parser",
)

PARSER_INVALID_KEYWORD: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_KEYWORD",
    message="Keyword may only contain letters, digits and `-`",
    category="parser",
)

PARSER_LEADING_WHITESPACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_LEADING_WHITESPACE",
    message="Keyword line must not start with whitespace",
    category="parser",
)

PARSER_TRAILING_WHITESPACE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_WHITESPACE",
    message="Trailing whitespace before end of line",
    hint="Remove the whitespace or parse in permissive mode.",
    category="parser",
)

PARSER_TRAILING_WHITESPACE_TOLERATED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_WHITESPACE",
    message="Ignoring trailing whitespace in permissive mode",
    severity="warning",
    category="parser",
)

PARSER_CRLF_LINE_ENDING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_CRLF_LINE_ENDING",
    message="Line ends with `\\r\\n` instead of `\\n`",
    hint="Convert line endings or parse in permissive mode.",
    category="parser",
)

PARSER_CRLF_LINE_ENDING_TOLERATED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_CRLF_LINE_ENDING",
    message="Accepting `\\r\\n` line ending in permissive mode",
    severity="warning",
    category="parser",
)

PARSER_EMPTY_LINE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EMPTY_LINE",
    message="Empty line where a keyword line or payload line was expected",
    category="parser",
)

PARSER_ORPHAN_OBJECT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ORPHAN_OBJECT",
    message="Object does not directly follow a keyword line",
    hint="An item carries at most one object, right after its keyword line.",
    category="parser",
)

PARSER_UNMATCHED_END: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNMATCHED_END",
    message="END delimiter without a preceding BEGIN delimiter",
    category="parser",
)

PARSER_UNTERMINATED_OBJECT: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNTERMINATED_OBJECT",
    message="Object is missing its END delimiter",
    category="parser",
)

PARSER_MISMATCHED_OBJECT_LABEL: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISMATCHED_OBJECT_LABEL",
    message="END delimiter label does not match the BEGIN label",
    hint="Use the same label after BEGIN and END or parse in permissive mode.",
    category="parser",
)

PARSER_MISMATCHED_OBJECT_LABEL_TOLERATED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISMATCHED_OBJECT_LABEL",
    message="Ignoring mismatched object labels in permissive mode",
    severity="warning",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token",
    category="parser",
)

BUILDER_INVALID_BASE64: Final[DiagnosticSpec] = DiagnosticSpec(
    code="BUILDER_INVALID_BASE64",
    message="Object payload is not valid padded standard base64",
    category="builder",
)
