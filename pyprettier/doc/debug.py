"""Readable dumps of document trees, in prettier's builder notation."""

from __future__ import annotations

from pyprettier.doc.builders import (
    BreakParent,
    Concat,
    Doc,
    Group,
    IfBreak,
    Indent,
    Line,
)


def debug_doc(doc: Doc) -> str:
    match doc:
        case str():
            return repr(doc)
        case Concat(parts=(Line(hard=True), BreakParent())):
            return "hardline"
        case Concat(parts=parts):
            return "[" + ", ".join(debug_doc(part) for part in parts) + "]"
        case Group(contents=contents, should_break=should_break):
            suffix = ", should_break=True" if should_break else ""
            return f"group({debug_doc(contents)}{suffix})"
        case Indent(contents=contents):
            return f"indent({debug_doc(contents)})"
        case Line(hard=True):
            return "hardline_without_break_parent"
        case Line(soft=True):
            return "softline"
        case Line():
            return "line"
        case IfBreak(break_contents=break_contents, flat_contents=flat_contents):
            return f"if_break({debug_doc(break_contents)}, {debug_doc(flat_contents)})"
        case BreakParent():
            return "break_parent"
    raise TypeError(f"Unexpected doc fragment: {doc!r}")
