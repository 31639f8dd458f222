"""Document IR and layout engine."""

from pyprettier.doc.builders import (
    BREAK_PARENT,
    BreakParent,
    Concat,
    Doc,
    Group,
    IfBreak,
    Indent,
    Line,
    concat,
    group,
    hardline,
    if_break,
    indent,
    join,
    line,
    softline,
)
from pyprettier.doc.debug import debug_doc
from pyprettier.doc.printer import PrintMode, print_doc_to_string, propagate_breaks

__all__ = [
    "BREAK_PARENT",
    "BreakParent",
    "Concat",
    "Doc",
    "Group",
    "IfBreak",
    "Indent",
    "Line",
    "PrintMode",
    "concat",
    "debug_doc",
    "group",
    "hardline",
    "if_break",
    "indent",
    "join",
    "line",
    "print_doc_to_string",
    "propagate_breaks",
    "softline",
]
