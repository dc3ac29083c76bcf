"""Parser events."""

from dataclasses import dataclass
from typing import Protocol

from netdocpy.diagnostics import Diagnostic
from netdocpy.syntax import NetdocSyntaxKind
from netdocpy.text import TextSize


@dataclass(frozen=True, slots=True)
class StartEvent:
    kind: NetdocSyntaxKind

    @staticmethod
    def tombstone() -> "StartEvent":
        return StartEvent(kind=NetdocSyntaxKind.TOMBSTONE)


@dataclass(frozen=True, slots=True)
class FinishEvent:
    pass


@dataclass(frozen=True, slots=True)
class TokenEvent:
    kind: NetdocSyntaxKind
    end: TextSize


Event = StartEvent | FinishEvent | TokenEvent


class TreeSink(Protocol):
    def token(self, kind: NetdocSyntaxKind, end: TextSize) -> None: ...

    def start_node(self, kind: NetdocSyntaxKind) -> None: ...

    def finish_node(self) -> None: ...

    def errors(self, errors: list[Diagnostic]) -> None: ...


def process_events(
    sink: TreeSink,
    events: list[Event],
    errors: list[Diagnostic],
) -> None:
    sink.errors(errors)

    for event in events:
        if isinstance(event, StartEvent):
            if event.kind == NetdocSyntaxKind.TOMBSTONE:
                raise RuntimeError("Parser left a marker without completing it")
            sink.start_node(event.kind)
        elif isinstance(event, FinishEvent):
            sink.finish_node()
        else:
            sink.token(event.kind, event.end)
