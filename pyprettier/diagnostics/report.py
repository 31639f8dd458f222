"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from pyprettier.diagnostics.codes import DiagnosticSpec
from pyprettier.diagnostics.diagnostic import Diagnostic


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def diagnostic_from_spec(
    spec: DiagnosticSpec,
    *,
    line: int,
    column: int,
    message: str | None = None,
) -> Diagnostic:
    """Build a positioned diagnostic, optionally overriding the code's default message."""
    return Diagnostic(
        code=spec.code,
        message=message if message is not None else spec.message,
        line=line,
        column=column,
        severity=spec.severity,
        hint=spec.hint,
        category=spec.category,
    )
