"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_SYNTAX_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_SYNTAX_ERROR",
    message="Invalid Python syntax",
    hint="Fix the syntax error before formatting; the source is left untouched.",
    severity="error",
    category="parser",
)

PARSER_NULL_BYTES: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NULL_BYTES",
    message="Source contains null bytes",
    severity="error",
    category="parser",
)
