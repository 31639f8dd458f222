"""Pipeline run result carriers."""

from __future__ import annotations

from dataclasses import dataclass

from pyprettier.diagnostics import Diagnostic
from pyprettier.pipeline.result import PythonParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: PythonParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
