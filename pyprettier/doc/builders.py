"""Document IR builders.

A document is a tree of immutable fragments that the layout engine turns into text.
The builders mirror prettier's `doc-builders`:

- plain `str` prints as-is and must not contain a newline;
- `concat` prints its parts in order;
- `group` either prints all of its contents flat or lets its breaks break;
- `indent` raises the indentation of every break inside it by one level;
- `line` is a space when flat and a newline when broken, `softline` is nothing when
  flat, `hardline` always breaks and forces every enclosing group to break;
- `if_break` picks its contents based on the mode of the enclosing group.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class Concat:
    parts: tuple[Doc, ...]


@dataclass(frozen=True, slots=True)
class Group:
    contents: Doc
    should_break: bool = False


@dataclass(frozen=True, slots=True)
class Indent:
    contents: Doc


@dataclass(frozen=True, slots=True)
class Line:
    """Break point; `soft` prints nothing when flat, `hard` never prints flat."""

    soft: bool = False
    hard: bool = False


@dataclass(frozen=True, slots=True)
class IfBreak:
    break_contents: Doc
    flat_contents: Doc = ""


@dataclass(frozen=True, slots=True)
class BreakParent:
    """Marker that forces every enclosing group to break."""


type Doc = str | Concat | Group | Indent | Line | IfBreak | BreakParent


def concat(parts: Iterable[Doc]) -> Concat:
    return Concat(parts=tuple(parts))


def join(separator: Doc, parts: Iterable[Doc]) -> Concat:
    """Interleave `separator` between `parts`."""
    joined: list[Doc] = []
    for index, part in enumerate(parts):
        if index > 0:
            joined.append(separator)
        joined.append(part)
    return Concat(parts=tuple(joined))


def group(contents: Doc, *, should_break: bool = False) -> Group:
    return Group(contents=contents, should_break=should_break)


def indent(contents: Doc) -> Indent:
    return Indent(contents=contents)


def if_break(break_contents: Doc, flat_contents: Doc = "") -> IfBreak:
    return IfBreak(break_contents=break_contents, flat_contents=flat_contents)


BREAK_PARENT: Final[BreakParent] = BreakParent()
line: Final[Line] = Line()
softline: Final[Line] = Line(soft=True)
hardline: Final[Concat] = Concat(parts=(Line(hard=True), BREAK_PARENT))


__all__ = [
    "BREAK_PARENT",
    "BreakParent",
    "Concat",
    "Doc",
    "Group",
    "IfBreak",
    "Indent",
    "Line",
    "concat",
    "group",
    "hardline",
    "if_break",
    "indent",
    "join",
    "line",
    "softline",
]
