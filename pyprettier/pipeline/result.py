"""Parse/lower carrier shared by the format pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pyprettier.diagnostics import has_errors
from pyprettier.parser.options import ParserOptions
from pyprettier.parser.python import ParsedModule

if TYPE_CHECKING:
    from pyprettier.ast import AstModule
    from pyprettier.diagnostics import Diagnostic


@dataclass(slots=True)
class PythonParseResult:
    """Python parse result with a lazily lowered AST."""

    source_text: str
    parsed: ParsedModule
    options: ParserOptions
    _ast_root: AstModule | None = field(default=None, init=False, repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.parsed.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.parsed.diagnostics)

    def ast_root(self) -> AstModule:
        if self._ast_root is None:
            if self.parsed.module is None:
                raise ValueError("Source did not parse; check diagnostics before lowering")
            from pyprettier.ast.lower import lower_module

            self._ast_root = lower_module(self.parsed.module, self.source_text)
        return self._ast_root
