"""Line-oriented parser recovery."""

from dataclasses import dataclass
from enum import StrEnum

from netdocpy.lexer import TokenKind
from netdocpy.parser.marker import CompletedMarker
from netdocpy.parser.parser import Parser
from netdocpy.syntax import NetdocSyntaxKind


class RecoveryError(StrEnum):
    EOF = "eof"
    ALREADY_RECOVERED = "already_recovered"


@dataclass(frozen=True, slots=True)
class ParseRecoveryTokenSet:
    """Recover by consuming tokens into an error node until a safe token is reached.

    With `line_break` enabled the rest of the current line, newline included,
    is consumed as well.
    """

    node_kind: NetdocSyntaxKind
    recovery_set: frozenset[TokenKind]
    line_break: bool = False

    def enable_recovery_on_line_break(self) -> "ParseRecoveryTokenSet":
        return ParseRecoveryTokenSet(
            node_kind=self.node_kind,
            recovery_set=self.recovery_set,
            line_break=True,
        )

    def recover(self, parser: Parser) -> tuple[CompletedMarker | None, RecoveryError | None]:
        if parser.at(TokenKind.EOF):
            return None, RecoveryError.EOF

        if parser.at_set(self.recovery_set):
            return None, RecoveryError.ALREADY_RECOVERED

        marker = parser.start()
        while not parser.at(TokenKind.EOF) and not parser.at_set(self.recovery_set):
            ended_line = parser.at(TokenKind.NEWLINE)
            parser.bump()
            if self.line_break and ended_line:
                break

        return marker.complete(parser, self.node_kind), None
