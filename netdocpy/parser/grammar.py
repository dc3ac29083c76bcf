"""Directory document grammar routines that emit CST events.

    Document    := Item* EOF
    Item        := KeywordLine Object?
    KeywordLine := Keyword (WS Argument)* NL
    Object      := BeginLine Base64Line* EndLine
    Base64Line  := Word (WS Word)* NL

Base64 alphabet and whitespace inside payload lines are left to the model
builder; everything else is checked here.
"""

import re
from typing import Final

from netdocpy.diagnostics import (
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
    Diagnostic,
    DiagnosticSpec,
)
from netdocpy.lexer import TokenFlags, TokenKind, delimiter_label
from netdocpy.parser.marker import CompletedMarker
from netdocpy.parser.parse_lists import ParseNodeList
from netdocpy.parser.parse_recovery import ParseRecoveryTokenSet
from netdocpy.parser.parsed_syntax import ParsedSyntax
from netdocpy.parser.parser import Parser
from netdocpy.syntax import NetdocSyntaxKind
from netdocpy.text import TextRange

KEYWORD_PATTERN: Final[re.Pattern[str]] = re.compile(r"[A-Za-z0-9-]+")


def parse_document_tree(parser: Parser) -> None:
    root = parser.start()
    parse_item_list(parser)

    # Whitespace after the final newline.
    trailing = parser.preceding_trivia_range
    if trailing is not None:
        parser.error(_trailing_whitespace(parser, trailing))

    root.complete(parser, NetdocSyntaxKind.DOCUMENT)


def parse_item_list(parser: Parser) -> CompletedMarker:
    recovery = ParseRecoveryTokenSet(
        node_kind=NetdocSyntaxKind.ERROR,
        recovery_set=frozenset({TokenKind.EOF}),
    ).enable_recovery_on_line_break()

    def recover_element(current: Parser, parsed: ParsedSyntax) -> bool:
        if parsed.is_present():
            return True

        current.error(_unexpected_line(current))

        # Swallow a whole stray object so its payload lines are not read as items.
        if current.at(TokenKind.BEGIN_DELIMITER):
            orphan = current.start()
            parse_object(current)
            orphan.complete(current, NetdocSyntaxKind.ERROR)
            return True

        _, recovery_error = recovery.recover(current)
        return recovery_error is None

    return ParseNodeList(
        list_kind=NetdocSyntaxKind.ITEM_LIST,
        is_at_list_end=lambda current: current.at(TokenKind.EOF),
        parse_element=parse_item,
        recover=recover_element,
    ).parse_list(parser)


def parse_item(parser: Parser) -> ParsedSyntax:
    if not parser.at(TokenKind.WORD):
        return ParsedSyntax.absent()

    marker = parser.start()
    parse_keyword_line(parser)
    if parser.at(TokenKind.BEGIN_DELIMITER):
        parse_object(parser)
    marker.complete(parser, NetdocSyntaxKind.ITEM)
    return ParsedSyntax.present()


def parse_keyword_line(parser: Parser) -> CompletedMarker:
    marker = parser.start()

    leading = parser.preceding_trivia_range
    if leading is not None:
        parser.error(_diagnostic(PARSER_LEADING_WHITESPACE, leading))

    keyword = parser.current_text
    if KEYWORD_PATTERN.fullmatch(keyword) is None:
        parser.error(
            _diagnostic(
                PARSER_INVALID_KEYWORD,
                parser.current_range,
                message=f"{PARSER_INVALID_KEYWORD.message}, got `{keyword}`",
            )
        )
    parser.bump_remap(NetdocSyntaxKind.KEYWORD)

    while parser.at(TokenKind.WORD):
        argument = parser.current_text
        if any(ch.isspace() for ch in argument):
            parser.error(
                _diagnostic(
                    PARSER_UNEXPECTED_TOKEN,
                    parser.current_range,
                    message=f"Argument {argument!r} contains whitespace other than space or tab",
                )
            )
        parser.bump_remap(NetdocSyntaxKind.ARGUMENT)

    _parse_line_end(parser)
    return marker.complete(parser, NetdocSyntaxKind.KEYWORD_LINE)


def parse_object(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    begin_range = parser.current_range
    begin_label = delimiter_label(parser.current_text)
    parser.bump()
    _parse_line_end(parser)

    while True:
        if parser.at(TokenKind.WORD):
            parse_base64_line(parser)
            continue
        if parser.at(TokenKind.NEWLINE):
            parser.error(_diagnostic(PARSER_EMPTY_LINE, parser.current_range))
            parser.bump()
            continue
        break

    if parser.at(TokenKind.END_DELIMITER):
        end_label = delimiter_label(parser.current_text)
        if end_label != begin_label:
            spec = (
                PARSER_MISMATCHED_OBJECT_LABEL_TOLERATED
                if parser.options.allow_mismatched_object_labels
                else PARSER_MISMATCHED_OBJECT_LABEL
            )
            parser.error(
                _diagnostic(
                    spec,
                    parser.current_range,
                    message=f"{spec.message}: `{end_label}` closes `{begin_label}`",
                )
            )
        parser.bump()
        _parse_line_end(parser)
    else:
        parser.error(
            _diagnostic(
                PARSER_UNTERMINATED_OBJECT,
                begin_range,
                message=f"Object `{begin_label}` is missing `-----END {begin_label}-----`",
            )
        )

    return marker.complete(parser, NetdocSyntaxKind.OBJECT)


def parse_base64_line(parser: Parser) -> CompletedMarker:
    marker = parser.start()
    while parser.at(TokenKind.WORD):
        parser.bump_remap(NetdocSyntaxKind.BASE64)
    _parse_line_end(parser, check_trailing_whitespace=False)
    return marker.complete(parser, NetdocSyntaxKind.BASE64_LINE)


def _parse_line_end(parser: Parser, *, check_trailing_whitespace: bool = True) -> None:
    if parser.at(TokenKind.NEWLINE):
        trailing = parser.preceding_trivia_range
        if check_trailing_whitespace and trailing is not None:
            parser.error(_trailing_whitespace(parser, trailing))

        if parser.current_flags & TokenFlags.CRLF:
            spec = (
                PARSER_CRLF_LINE_ENDING_TOLERATED
                if parser.options.allow_crlf_line_endings
                else PARSER_CRLF_LINE_ENDING
            )
            parser.error(_diagnostic(spec, parser.current_range))

        parser.bump()
        return

    if parser.at(TokenKind.EOF):
        parser.error(_diagnostic(PARSER_MISSING_NEWLINE, parser.current_range))
        return

    parser.error(_unexpected_token(parser))


def _trailing_whitespace(parser: Parser, range: TextRange) -> Diagnostic:
    spec = (
        PARSER_TRAILING_WHITESPACE_TOLERATED
        if parser.options.allow_trailing_whitespace
        else PARSER_TRAILING_WHITESPACE
    )
    return _diagnostic(spec, range)


def _unexpected_line(parser: Parser) -> Diagnostic:
    match parser.current:
        case TokenKind.NEWLINE:
            return _diagnostic(PARSER_EMPTY_LINE, parser.current_range)
        case TokenKind.BEGIN_DELIMITER:
            return _diagnostic(PARSER_ORPHAN_OBJECT, parser.current_range)
        case TokenKind.END_DELIMITER:
            return _diagnostic(PARSER_UNMATCHED_END, parser.current_range)
        case _:
            return _unexpected_token(parser)


def _unexpected_token(parser: Parser) -> Diagnostic:
    return _diagnostic(
        PARSER_UNEXPECTED_TOKEN,
        parser.current_range,
        message=f"Unexpected token {parser.current.name}",
    )


def _diagnostic(spec: DiagnosticSpec, range: TextRange, *, message: str | None = None) -> Diagnostic:
    return Diagnostic(
        code=spec.code,
        message=message if message is not None else spec.message,
        range=range,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )
