"""Printer errors."""

from __future__ import annotations


class UnsupportedNodeKind(ValueError):
    """Raised when a node has no printing rule.

    This signals a parser/printer mismatch or a construct outside the supported
    subset, never a transient failure.
    """

    def __init__(self, kind: str, detail: str | None = None) -> None:
        self.kind = kind
        self.detail = detail
        message = f"Unsupported node kind: {kind!r}"
        if detail is not None:
            message = f"{message} ({detail})"
        super().__init__(message)
