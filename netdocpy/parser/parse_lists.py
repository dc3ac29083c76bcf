"""Reusable node-list parse loop."""

from collections.abc import Callable
from dataclasses import dataclass

from netdocpy.lexer import TokenKind
from netdocpy.parser.marker import CompletedMarker
from netdocpy.parser.parsed_syntax import ParsedSyntax
from netdocpy.parser.parser import Parser, ParserProgress
from netdocpy.syntax import NetdocSyntaxKind


@dataclass(slots=True)
class ParseNodeList:
    """Non-separated list parser with progress and recovery hooks."""

    list_kind: NetdocSyntaxKind
    is_at_list_end: Callable[[Parser], bool]
    parse_element: Callable[[Parser], ParsedSyntax]
    recover: Callable[[Parser, ParsedSyntax], bool]

    def parse_list(self, parser: Parser) -> CompletedMarker:
        marker = parser.start()
        progress = ParserProgress()

        while not parser.at(TokenKind.EOF) and not self.is_at_list_end(parser):
            progress.assert_progressing(parser)
            parsed_element = self.parse_element(parser)
            if not self.recover(parser, parsed_element):
                break

        return marker.complete(parser, self.list_kind)
