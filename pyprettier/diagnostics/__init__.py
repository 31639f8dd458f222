"""Diagnostics."""

from pyprettier.diagnostics.codes import (
    PARSER_NULL_BYTES,
    PARSER_SYNTAX_ERROR,
    DiagnosticSpec,
)
from pyprettier.diagnostics.diagnostic import Diagnostic, Severity
from pyprettier.diagnostics.report import (
    diagnostic_from_spec,
    has_errors,
)

__all__ = [
    "PARSER_NULL_BYTES",
    "PARSER_SYNTAX_ERROR",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "diagnostic_from_spec",
    "has_errors",
]
