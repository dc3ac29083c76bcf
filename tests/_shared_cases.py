"""Centralized directory document cases used across lexer/parser/document tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Literal, cast


@dataclass(frozen=True, slots=True)
class NetdocCase:
    name: str
    source: str
    item_count: int
    strict_should_parse_cleanly: bool = True


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


VALID_CASES: tuple[NetdocCase, ...] = (
    NetdocCase(name="empty_document", source="", item_count=0),
    NetdocCase(name="keyword_only", source="network-status-version\n", item_count=1),
    NetdocCase(name="keyword_with_arguments", source="fingerprint AAAA BBBB\n", item_count=1),
    NetdocCase(
        name="tab_separated_arguments",
        source="bandwidth\t100 \t200\t300\n",
        item_count=1,
    ),
    NetdocCase(
        name="single_line_object",
        source="signature x\n-----BEGIN X-----\nAAAA\n-----END X-----\n",
        item_count=1,
    ),
    NetdocCase(
        name="multi_word_label",
        source=_dedent(
            """
            onion-key
            -----BEGIN RSA PUBLIC KEY-----
            AQID
            -----END RSA PUBLIC KEY-----
            """
        ),
        item_count=1,
    ),
    NetdocCase(
        name="empty_object",
        source="signature\n-----BEGIN SIGNATURE-----\n-----END SIGNATURE-----\n",
        item_count=1,
    ),
    NetdocCase(
        name="three_items_mixed",
        source=_dedent(
            """
            r relay1 AAAA 2024-01-01 00:00:00 10.0.0.1 9001 0
            s Fast Guard Running Stable Valid
            directory-signature sha256 ABCD EF01
            -----BEGIN SIGNATURE-----
            aGVsbG8g
            d29ybGQ=
            -----END SIGNATURE-----
            """
        ),
        item_count=3,
    ),
    NetdocCase(
        name="arguments_with_punctuation",
        source="params CircuitPriorityHalflifeMsec=30000 bwauthpid=1 x!@#$%^&*()\n",
        item_count=1,
    ),
    NetdocCase(
        name="repeated_keywords",
        source="known-flags Exit\nknown-flags Guard\nknown-flags Fast\n",
        item_count=3,
    ),
)

INVALID_CASES: tuple[NetdocCase, ...] = (
    NetdocCase(
        name="missing_final_newline",
        source="fingerprint AAAA",
        item_count=0,
        strict_should_parse_cleanly=False,
    ),
    NetdocCase(
        name="unterminated_object",
        source="signature\n-----BEGIN X-----\nAAAA\n",
        item_count=0,
        strict_should_parse_cleanly=False,
    ),
    NetdocCase(
        name="orphan_object",
        source="-----BEGIN X-----\nAAAA\n-----END X-----\n",
        item_count=0,
        strict_should_parse_cleanly=False,
    ),
    NetdocCase(
        name="unmatched_end",
        source="a\n-----END X-----\n",
        item_count=0,
        strict_should_parse_cleanly=False,
    ),
    NetdocCase(
        name="empty_line_between_items",
        source="a\n\nb\n",
        item_count=0,
        strict_should_parse_cleanly=False,
    ),
    NetdocCase(
        name="leading_whitespace",
        source="  a b\n",
        item_count=0,
        strict_should_parse_cleanly=False,
    ),
    NetdocCase(
        name="invalid_keyword_characters",
        source="bad_keyword x\n",
        item_count=0,
        strict_should_parse_cleanly=False,
    ),
    NetdocCase(
        name="second_object_on_item",
        source="a\n-----BEGIN X-----\n-----END X-----\n-----BEGIN Y-----\n-----END Y-----\n",
        item_count=0,
        strict_should_parse_cleanly=False,
    ),
)

ALL_NETDOC_CASES: tuple[NetdocCase, ...] = VALID_CASES + INVALID_CASES

CaseName = Literal[
    "empty_document",
    "keyword_only",
    "keyword_with_arguments",
    "tab_separated_arguments",
    "single_line_object",
    "multi_word_label",
    "empty_object",
    "three_items_mixed",
    "arguments_with_punctuation",
    "repeated_keywords",
    "missing_final_newline",
    "unterminated_object",
    "orphan_object",
    "unmatched_end",
    "empty_line_between_items",
    "leading_whitespace",
    "invalid_keyword_characters",
    "second_object_on_item",
]

CASE_BY_NAME: dict[CaseName, NetdocCase] = cast(
    dict[CaseName, NetdocCase],
    {case.name: case for case in ALL_NETDOC_CASES},
)


def case_source(name: CaseName) -> str:
    return CASE_BY_NAME[name].source


def case_id(case: NetdocCase) -> str:
    return case.name
