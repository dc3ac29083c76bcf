"""Shared parse carriers."""

from netdocpy.pipeline.result import NetdocParseResult, ParseResultBase

__all__ = [
    "NetdocParseResult",
    "ParseResultBase",
]
