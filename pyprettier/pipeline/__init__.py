"""Shared parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pyprettier.parser.options import ParserOptions
from pyprettier.pipeline.result import PythonParseResult
from pyprettier.pipeline.results import FormatRunResult

if TYPE_CHECKING:
    from pyprettier.format.options import FormatOptions


def run_format(
    text: str,
    options: FormatOptions | None = None,
    *,
    parser_options: ParserOptions | None = None,
    parse: PythonParseResult | None = None,
) -> FormatRunResult:
    from pyprettier.format.runner import run_format as _run_format

    return _run_format(text, options, parser_options=parser_options, parse=parse)


__all__ = [
    "FormatRunResult",
    "PythonParseResult",
    "run_format",
]
