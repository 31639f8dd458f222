"""Adapter over CPython's parser that reports failures as diagnostics."""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pyprettier.diagnostics import (
    PARSER_NULL_BYTES,
    PARSER_SYNTAX_ERROR,
    Diagnostic,
    diagnostic_from_spec,
)
from pyprettier.parser.options import ParserOptions

if TYPE_CHECKING:
    from pyprettier.pipeline.result import PythonParseResult


@dataclass(frozen=True, slots=True)
class ParsedModule:
    """Raw parser output; `module` is None when the source did not parse."""

    module: ast.Module | None
    diagnostics: list[Diagnostic] = field(default_factory=list)


def parse(text: str, options: ParserOptions | None = None) -> ParsedModule:
    resolved = options if options is not None else ParserOptions()
    try:
        module = ast.parse(
            text,
            filename=resolved.filename,
            feature_version=resolved.feature_version,
        )
    except SyntaxError as exc:
        return ParsedModule(module=None, diagnostics=[_syntax_error_diagnostic(exc)])
    except ValueError as exc:
        # Raised by `compile` for source containing null bytes.
        return ParsedModule(
            module=None,
            diagnostics=[diagnostic_from_spec(PARSER_NULL_BYTES, line=1, column=0, message=str(exc))],
        )
    return ParsedModule(module=module)


def parse_result(text: str, options: ParserOptions | None = None) -> PythonParseResult:
    from pyprettier.pipeline.result import PythonParseResult

    resolved = options if options is not None else ParserOptions()
    return PythonParseResult(
        source_text=text,
        parsed=parse(text, options=resolved),
        options=resolved,
    )


def _syntax_error_diagnostic(exc: SyntaxError) -> Diagnostic:
    line = exc.lineno if exc.lineno is not None else 1
    # SyntaxError offsets are 1-based.
    column = exc.offset - 1 if exc.offset else 0
    message = f"{PARSER_SYNTAX_ERROR.message}: {exc.msg}"
    return diagnostic_from_spec(PARSER_SYNTAX_ERROR, line=line, column=column, message=message)
