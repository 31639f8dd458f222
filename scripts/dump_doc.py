#!/usr/bin/env python
"""Dump the lowered AST, the document IR and the formatted output of a Python file."""

from __future__ import annotations

import argparse
from pathlib import Path
from pprint import pformat

from pyprettier.doc import debug_doc, print_doc_to_string
from pyprettier.format import FormatOptions
from pyprettier.parser import parse_result
from pyprettier.printer import print_ast


def main() -> int:
    parser = argparse.ArgumentParser(description="Dump AST/doc/output for one Python file")
    parser.add_argument("path", type=Path, help="Python source file to dump")
    parser.add_argument("--width", type=int, default=80, help="Print width (default: 80)")
    parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the dump here instead of stdout",
    )
    args = parser.parse_args()

    text = args.path.read_text(encoding="utf-8")
    parsed = parse_result(text)
    if parsed.has_errors:
        for diagnostic in parsed.diagnostics:
            print(f"{args.path}:{diagnostic.line}:{diagnostic.column}: {diagnostic.code} {diagnostic.message}")
        return 1

    ast_root = parsed.ast_root()
    doc = print_ast(ast_root)
    sections = [
        "===== AST =====",
        pformat(ast_root),
        "===== DOC =====",
        debug_doc(doc),
        "===== OUTPUT =====",
        print_doc_to_string(doc, FormatOptions(print_width=args.width)),
    ]
    dump = "\n".join(sections)

    if args.out is None:
        print(dump)
        return 0

    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(dump, encoding="utf-8")
    print(f"Wrote dump for {args.path} to {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
