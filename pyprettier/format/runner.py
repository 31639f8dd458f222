"""Format runner over a shared Python parse result."""

from __future__ import annotations

from pyprettier.doc import print_doc_to_string
from pyprettier.format.options import FormatOptions
from pyprettier.parser import ParserOptions, parse_result
from pyprettier.pipeline.result import PythonParseResult
from pyprettier.pipeline.results import FormatRunResult
from pyprettier.printer import print_ast


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parser_options: ParserOptions | None = None,
    parse: PythonParseResult | None = None,
) -> FormatRunResult:
    """Run formatting from a single parse lifecycle.

    Source that fails to parse is returned unchanged alongside its diagnostics.
    `UnsupportedNodeKind` from the printer propagates to the caller.
    """
    resolved_parse = _resolve_parse(text, parser_options=parser_options, parse=parse)
    diagnostics = list(resolved_parse.diagnostics)

    if resolved_parse.has_errors:
        return FormatRunResult(
            parse=resolved_parse,
            formatted_text=resolved_parse.source_text,
            diagnostics=diagnostics,
            changed=False,
        )

    doc = print_ast(resolved_parse.ast_root())
    formatted_text = print_doc_to_string(doc, options)
    changed = formatted_text != resolved_parse.source_text

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        diagnostics=diagnostics,
        changed=changed,
    )


def format_text(text: str, options: FormatOptions | None = None) -> str:
    """Format `text`, raising `ValueError` when it does not parse."""
    result = run_format(text, options)
    if result.parse.has_errors:
        first = result.diagnostics[0]
        raise ValueError(f"{first.line}:{first.column}: {first.message}")
    return result.formatted_text


def _resolve_parse(
    text: str,
    *,
    parser_options: ParserOptions | None,
    parse: PythonParseResult | None,
) -> PythonParseResult:
    if parse is not None:
        if parser_options is not None:
            raise ValueError("Pass either parse or parser_options, not both")
        return parse
    return parse_result(text, options=parser_options)
