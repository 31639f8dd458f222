"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the parser adapter or the formatter."""

    code: str
    message: str
    line: int
    column: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
