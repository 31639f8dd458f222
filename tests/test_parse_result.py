import pytest

from pyprettier.ast import AstModule
from pyprettier.parser import ParserOptions, parse, parse_result


def test_parse_result_lowers_lazily_and_caches() -> None:
    result = parse_result("x = 1\n")

    assert result.diagnostics == []
    assert result.has_errors is False
    root = result.ast_root()
    assert isinstance(root, AstModule)
    assert result.ast_root() is root


def test_syntax_error_becomes_diagnostic() -> None:
    result = parse_result("x = 1\ndef f(:\n    pass\n")

    assert result.has_errors is True
    assert len(result.diagnostics) == 1
    diagnostic = result.diagnostics[0]
    assert diagnostic.code == "PARSER_SYNTAX_ERROR"
    assert diagnostic.category == "parser"
    assert diagnostic.line == 2
    assert diagnostic.message.startswith("Invalid Python syntax: ")


def test_ast_root_requires_successful_parse() -> None:
    result = parse_result("(\n")

    with pytest.raises(ValueError, match="did not parse"):
        result.ast_root()


def test_null_bytes_are_reported() -> None:
    parsed = parse("x = 1\0\n")

    assert parsed.module is None
    assert len(parsed.diagnostics) == 1
    assert parsed.diagnostics[0].severity == "error"


def test_feature_version_is_forwarded() -> None:
    parsed = parse("match = 1\n", ParserOptions(feature_version=(3, 8)))

    assert parsed.module is not None
    assert parsed.diagnostics == []


def test_parser_options_reject_python_2() -> None:
    with pytest.raises(ValueError, match="Python 3"):
        ParserOptions(feature_version=(2, 7))
