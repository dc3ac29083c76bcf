"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Tolerances for documents that bend the line grammar.

    Each tolerated deviation is still reported, as a warning.
    """

    mode: ParseMode = ParseMode.STRICT
    allow_trailing_whitespace: bool = False
    allow_crlf_line_endings: bool = False
    allow_mismatched_object_labels: bool = False

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(
                mode=mode,
                allow_trailing_whitespace=True,
                allow_crlf_line_endings=True,
                allow_mismatched_object_labels=True,
            )

        return ParserOptions(mode=mode)
