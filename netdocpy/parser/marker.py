"""Markers for event-based parsing."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from netdocpy.parser.event import FinishEvent, StartEvent
from netdocpy.syntax import NetdocSyntaxKind
from netdocpy.text import TextSize

if TYPE_CHECKING:
    from netdocpy.parser.parser import Parser


@dataclass(slots=True)
class Marker:
    pos: int
    start: TextSize

    def complete(self, parser: Parser, kind: NetdocSyntaxKind) -> CompletedMarker:
        event = parser.events[self.pos]
        if not isinstance(event, StartEvent) or event.kind != NetdocSyntaxKind.TOMBSTONE:
            raise RuntimeError("Marker must point to an open StartEvent")
        parser.events[self.pos] = StartEvent(kind=kind)

        finish_pos = len(parser.events)
        parser.events.append(FinishEvent())
        return CompletedMarker(kind=kind, start_pos=self.pos, finish_pos=finish_pos, offset=self.start)


@dataclass(frozen=True, slots=True)
class CompletedMarker:
    kind: NetdocSyntaxKind
    start_pos: int
    finish_pos: int
    offset: TextSize
