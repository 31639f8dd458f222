"""Shared debug printers for parser/ast/printer tests."""

from __future__ import annotations

import os
from pprint import pformat

from pyprettier.ast import AstNode
from pyprettier.diagnostics import Diagnostic
from pyprettier.doc import Doc, debug_doc

PRINT_SOURCE = os.getenv("PRINT_SOURCE", "0").lower() in {"1", "true", "yes", "on"}
PRINT_AST = os.getenv("PRINT_AST", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DOC = os.getenv("PRINT_DOC", "0").lower() in {"1", "true", "yes", "on"}
PRINT_OUTPUT = os.getenv("PRINT_OUTPUT", "0").lower() in {"1", "true", "yes", "on"}
PRINT_DIAGNOSTICS = os.getenv("PRINT_DIAGNOSTICS", "0").lower() in {
    "1",
    "true",
    "yes",
    "on",
}


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_ast(test_name: str, node: AstNode) -> None:
    if not PRINT_AST:
        return
    print(f"\n===== {test_name} AST =====")
    print(pformat(node))


def debug_dump_doc(test_name: str, doc: Doc) -> None:
    if not PRINT_DOC:
        return
    print(f"\n===== {test_name} DOC =====")
    print(debug_doc(doc))


def debug_dump_output(test_name: str, output: str) -> None:
    if not PRINT_OUTPUT:
        return
    print(f"\n===== {test_name} OUTPUT =====")
    print(output, end="")


def debug_dump_diagnostics(test_name: str, diagnostics: list[Diagnostic]) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    print(f"\n===== {test_name} DIAGNOSTICS =====")
    if not diagnostics:
        print("(none)")
        return
    for diagnostic in diagnostics:
        print(f"{diagnostic.line}:{diagnostic.column} {diagnostic.code} {diagnostic.message}")
