"""Parser adapter over CPython's `ast` module."""

from pyprettier.parser.options import ParserOptions
from pyprettier.parser.python import ParsedModule, parse, parse_result

__all__ = [
    "ParsedModule",
    "ParserOptions",
    "parse",
    "parse_result",
]
