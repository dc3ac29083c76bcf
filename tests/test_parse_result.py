import pytest

from netdocpy import DocumentSyntaxError, InvalidBase64Error, parse_document
from netdocpy.parser import ParseMode, parse, parse_result
from netdocpy.syntax import NetdocSyntaxKind


def test_parse_result_exposes_green_diagnostics_and_error_state() -> None:
    result = parse_result("a\n")

    assert result.green_root() is result.parsed.root
    assert result.diagnostics == []
    assert result.has_errors is False
    assert result.ok is True
    assert result.error() is None


def test_parse_result_caches_syntax_and_document() -> None:
    result = parse_result("a b\n")

    first_syntax = result.syntax_root()
    second_syntax = result.syntax_root()
    assert first_syntax is second_syntax
    assert first_syntax.kind == NetdocSyntaxKind.ROOT

    first_document = result.document()
    second_document = result.document()
    assert first_document is second_document
    assert first_document == parse_document("a b\n")


def test_parse_result_exposes_syntax_error_as_value() -> None:
    result = parse_result("a")

    error = result.error()
    assert isinstance(error, DocumentSyntaxError)
    assert result.error() is error
    assert result.ok is False
    with pytest.raises(DocumentSyntaxError) as excinfo:
        result.document()
    assert excinfo.value is error


def test_parse_result_exposes_invalid_base64_as_value() -> None:
    result = parse_result("a\n-----BEGIN X-----\n!!!!\n-----END X-----\n")

    assert result.has_errors is False
    assert isinstance(result.error(), InvalidBase64Error)
    with pytest.raises(InvalidBase64Error):
        result.document()


def test_parse_result_strict_and_permissive_match_parse_contract() -> None:
    source = "a b \n"

    strict_result = parse_result(source)
    permissive_result = parse_result(source, mode=ParseMode.PERMISSIVE)

    strict_parsed = parse(source)
    permissive_parsed = parse(source, mode=ParseMode.PERMISSIVE)

    assert strict_result.diagnostics == strict_parsed.diagnostics
    assert permissive_result.diagnostics == permissive_parsed.diagnostics
    assert strict_result.has_errors is True
    assert permissive_result.has_errors is False
    assert permissive_result.options.mode == ParseMode.PERMISSIVE
    assert permissive_result.document().items[0].arguments == ("b",)


def test_parse_result_for_empty_source() -> None:
    result = parse_result("")
    assert len(result.document()) == 0
