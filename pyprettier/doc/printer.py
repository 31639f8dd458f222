"""Render a document tree to text within a maximum line width."""

from __future__ import annotations

from enum import Enum

from pyprettier.doc.builders import (
    BreakParent,
    Concat,
    Doc,
    Group,
    IfBreak,
    Indent,
    Line,
)
from pyprettier.format.options import FormatOptions


class PrintMode(Enum):
    BREAK = "break"
    FLAT = "flat"


type _Command = tuple[int, PrintMode, Doc]


def propagate_breaks(doc: Doc) -> Doc:
    """Return `doc` with every group that contains a hard break marked broken."""
    propagated, _ = _propagate(doc)
    return propagated


def _propagate(doc: Doc) -> tuple[Doc, bool]:
    match doc:
        case str():
            return doc, False
        case BreakParent():
            return doc, True
        case Line(hard=hard):
            return doc, hard
        case Concat(parts=parts):
            new_parts: list[Doc] = []
            breaks = False
            for part in parts:
                new_part, part_breaks = _propagate(part)
                new_parts.append(new_part)
                breaks = breaks or part_breaks
            return Concat(parts=tuple(new_parts)), breaks
        case Indent(contents=contents):
            new_contents, breaks = _propagate(contents)
            return Indent(contents=new_contents), breaks
        case Group(contents=contents, should_break=should_break):
            new_contents, breaks = _propagate(contents)
            return Group(contents=new_contents, should_break=should_break or breaks), (
                should_break or breaks
            )
        case IfBreak(break_contents=break_contents, flat_contents=flat_contents):
            new_break, break_breaks = _propagate(break_contents)
            new_flat, flat_breaks = _propagate(flat_contents)
            return IfBreak(break_contents=new_break, flat_contents=new_flat), (
                break_breaks or flat_breaks
            )
    raise TypeError(f"Unexpected doc fragment: {doc!r}")


def print_doc_to_string(doc: Doc, options: FormatOptions | None = None) -> str:
    """Lay out `doc` greedily: a group stays flat when it fits on the current line."""
    resolved = options if options is not None else FormatOptions()
    newline = resolved.end_of_line.newline
    indent_unit = " " * resolved.tab_width

    out: list[str] = []
    position = 0
    commands: list[_Command] = [(0, PrintMode.BREAK, propagate_breaks(doc))]

    while commands:
        level, mode, current = commands.pop()
        match current:
            case str():
                out.append(current)
                position += len(current)
            case Concat(parts=parts):
                for part in reversed(parts):
                    commands.append((level, mode, part))
            case Indent(contents=contents):
                commands.append((level + 1, mode, contents))
            case Group(contents=contents, should_break=should_break):
                if mode is PrintMode.FLAT and not should_break:
                    commands.append((level, PrintMode.FLAT, contents))
                    continue
                flat: _Command = (level, PrintMode.FLAT, contents)
                remaining = resolved.print_width - position
                if not should_break and _fits(flat, commands, remaining):
                    commands.append(flat)
                else:
                    commands.append((level, PrintMode.BREAK, contents))
            case IfBreak(break_contents=break_contents, flat_contents=flat_contents):
                chosen = break_contents if mode is PrintMode.BREAK else flat_contents
                commands.append((level, mode, chosen))
            case Line(soft=soft, hard=hard):
                if mode is PrintMode.FLAT and not hard:
                    if not soft:
                        out.append(" ")
                        position += 1
                    continue
                _trim_trailing_whitespace(out)
                prefix = indent_unit * level
                out.append(newline + prefix)
                position = len(prefix)
            case BreakParent():
                pass
            case _:
                raise TypeError(f"Unexpected doc fragment: {current!r}")

    return "".join(out)


def _fits(next_command: _Command, rest: list[_Command], width: int) -> bool:
    # Rest commands keep their own mode; a break in break mode ends the current line.
    rest_index = len(rest)
    pending: list[_Command] = [next_command]
    while width >= 0:
        if not pending:
            if rest_index == 0:
                return True
            rest_index -= 1
            pending.append(rest[rest_index])
            continue

        level, mode, current = pending.pop()
        match current:
            case str():
                width -= len(current)
            case Concat(parts=parts):
                for part in reversed(parts):
                    pending.append((level, mode, part))
            case Indent(contents=contents):
                pending.append((level, mode, contents))
            case Group(contents=contents, should_break=should_break):
                group_mode = PrintMode.BREAK if should_break else mode
                pending.append((level, group_mode, contents))
            case IfBreak(break_contents=break_contents, flat_contents=flat_contents):
                chosen = break_contents if mode is PrintMode.BREAK else flat_contents
                pending.append((level, mode, chosen))
            case Line(soft=soft, hard=hard):
                if mode is PrintMode.BREAK or hard:
                    return True
                if not soft:
                    width -= 1
            case BreakParent():
                pass
    return False


def _trim_trailing_whitespace(out: list[str]) -> None:
    while out:
        trimmed = out[-1].rstrip(" \t")
        if trimmed:
            out[-1] = trimmed
            return
        out.pop()
