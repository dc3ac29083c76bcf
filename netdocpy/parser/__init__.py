"""Parser infrastructure (token source + event-based parser + tree sink)."""

from netdocpy.parser.event import (
    Event,
    FinishEvent,
    StartEvent,
    TokenEvent,
    process_events,
)
from netdocpy.parser.grammar import (
    KEYWORD_PATTERN,
    parse_base64_line,
    parse_document_tree,
    parse_item,
    parse_item_list,
    parse_keyword_line,
    parse_object,
)
from netdocpy.parser.marker import CompletedMarker, Marker
from netdocpy.parser.netdoc import parse, parse_result
from netdocpy.parser.options import ParseMode, ParserOptions
from netdocpy.parser.parse import build_lossless_tree
from netdocpy.parser.parse_lists import ParseNodeList
from netdocpy.parser.parse_recovery import ParseRecoveryTokenSet, RecoveryError
from netdocpy.parser.parsed_syntax import ParsedSyntax
from netdocpy.parser.parser import Parser, ParserProgress
from netdocpy.parser.token_source import TokenSource
from netdocpy.parser.tree_sink import LosslessTreeSink, ParsedGreenTree

__all__ = [
    "KEYWORD_PATTERN",
    "CompletedMarker",
    "Event",
    "FinishEvent",
    "LosslessTreeSink",
    "Marker",
    "ParseMode",
    "ParseNodeList",
    "ParseRecoveryTokenSet",
    "ParsedGreenTree",
    "ParsedSyntax",
    "Parser",
    "ParserOptions",
    "ParserProgress",
    "RecoveryError",
    "StartEvent",
    "TokenEvent",
    "TokenSource",
    "build_lossless_tree",
    "parse",
    "parse_base64_line",
    "parse_document_tree",
    "parse_item",
    "parse_item_list",
    "parse_keyword_line",
    "parse_object",
    "parse_result",
    "process_events",
]
