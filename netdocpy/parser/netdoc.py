"""High-level parse entrypoint for directory document text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from netdocpy.lexer import Lexer
from netdocpy.parser.grammar import parse_document_tree
from netdocpy.parser.options import ParseMode, ParserOptions
from netdocpy.parser.parse import build_lossless_tree
from netdocpy.parser.parser import Parser
from netdocpy.parser.token_source import TokenSource
from netdocpy.parser.tree_sink import ParsedGreenTree

if TYPE_CHECKING:
    from netdocpy.pipeline import NetdocParseResult


def _resolve_options(
    options: ParserOptions | None,
    mode: ParseMode | None,
) -> ParserOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ParserOptions.for_mode(mode)

    return ParserOptions()


def parse(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> ParsedGreenTree:
    resolved_options = _resolve_options(options=options, mode=mode)

    source = TokenSource(Lexer(text))
    parser = Parser(source, options=resolved_options)

    parse_document_tree(parser)
    events, diagnostics = parser.finish()

    return build_lossless_tree(
        text=text,
        events=events,
        trivia=source.finish(),
        diagnostics=diagnostics,
    )


def parse_result(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> NetdocParseResult:
    from netdocpy.pipeline import NetdocParseResult

    resolved_options = _resolve_options(options=options, mode=mode)
    parsed = parse(text, options=resolved_options)
    return NetdocParseResult(
        source_text=text,
        parsed=parsed,
        options=resolved_options,
    )
