"""Syntax kinds."""

from netdocpy.syntax.kind import NetdocSyntaxKind

__all__ = ["NetdocSyntaxKind"]
