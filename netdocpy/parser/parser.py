"""Event-based parser core."""

from dataclasses import dataclass

from netdocpy.diagnostics import Diagnostic
from netdocpy.lexer import TokenFlags, TokenKind
from netdocpy.parser.event import Event, StartEvent, TokenEvent
from netdocpy.parser.marker import Marker
from netdocpy.parser.options import ParserOptions
from netdocpy.parser.token_source import TokenSource
from netdocpy.syntax import NetdocSyntaxKind
from netdocpy.text import TextRange, TextSize


@dataclass(slots=True)
class ParserProgress:
    """Detect parser stalls inside list-style loops."""

    _position: TextSize | None = None

    def has_progressed(self, parser: "Parser") -> bool:
        has_progressed = self._position is None or self._position < parser.position
        self._position = parser.position
        return has_progressed

    def assert_progressing(self, parser: "Parser") -> None:
        if not self.has_progressed(parser):
            raise RuntimeError(f"Parser stopped making progress at {parser.current.name} {parser.current_range}")


class Parser:
    """Event-based parser."""

    def __init__(self, source: TokenSource, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._events: list[Event] = []
        self._diagnostics: list[Diagnostic] = []

    @property
    def source(self) -> TokenSource:
        return self._source

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def events(self) -> list[Event]:
        return self._events

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self._diagnostics

    @property
    def current(self) -> TokenKind:
        return self._source.current

    @property
    def current_range(self) -> TextRange:
        return self._source.current_range

    @property
    def current_text(self) -> str:
        rng = self._source.current_range
        return self._source.text[rng.start.value : rng.end.value]

    @property
    def current_flags(self) -> TokenFlags:
        return self._source.current_flags

    @property
    def position(self) -> TextSize:
        return self._source.position

    @property
    def has_preceding_line_break(self) -> bool:
        return self._source.has_preceding_line_break

    @property
    def has_preceding_trivia(self) -> bool:
        return self._source.has_preceding_trivia

    @property
    def preceding_trivia_range(self) -> TextRange | None:
        """Range of the whitespace directly before the current token, if any."""
        if not self._source.has_preceding_trivia:
            return None
        trivia = self._source.trivia[-1]
        return TextRange.new(trivia.range.start, self.current_range.start)

    def at(self, kind: TokenKind) -> bool:
        return self.current == kind

    def at_set(self, kinds: frozenset[TokenKind] | set[TokenKind]) -> bool:
        return self.current in kinds

    def start(self) -> Marker:
        pos = len(self._events)
        self._events.append(StartEvent.tombstone())
        return Marker(pos=pos, start=self.position)

    def bump(self) -> None:
        if self.current == TokenKind.EOF:
            return
        self.bump_remap(NetdocSyntaxKind.from_token_kind(self.current))

    def bump_remap(self, kind: NetdocSyntaxKind) -> None:
        """Consume the current token, recording it under `kind`."""
        if self.current == TokenKind.EOF:
            return
        self._events.append(TokenEvent(kind=kind, end=self.current_range.end))
        self._source.bump()

    def error(self, diagnostic: Diagnostic) -> None:
        for previous in reversed(self._diagnostics):
            if previous.range.start != diagnostic.range.start:
                break
            if previous.code == diagnostic.code:
                return
        self._diagnostics.append(diagnostic)

    def finish(self) -> tuple[list[Event], list[Diagnostic]]:
        return self._events, self._diagnostics
