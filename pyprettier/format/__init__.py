"""Formatting entrypoints and layout options."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyprettier.format.options import EndOfLine, FormatOptions, FormatProfile

if TYPE_CHECKING:
    from pyprettier.parser.options import ParserOptions
    from pyprettier.pipeline.result import PythonParseResult
    from pyprettier.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parser_options: ParserOptions | None = None,
    parse: PythonParseResult | None = None,
) -> FormatRunResult:
    from pyprettier.format.runner import run_format as _run_format

    return _run_format(text, options, parser_options=parser_options, parse=parse)


def format_text(text: str, options: FormatOptions | None = None) -> str:
    from pyprettier.format.runner import format_text as _format_text

    return _format_text(text, options)


__all__ = [
    "EndOfLine",
    "FormatOptions",
    "FormatProfile",
    "format_text",
    "run_format",
]
