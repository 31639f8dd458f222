"""Map Python AST nodes to document fragments.

`generic_print` handles exactly one node and recurses into children through the path
cursor. It never decides line breaks: groups, indents and line variants only mark
where the layout engine may break.
"""

from __future__ import annotations

from typing import Final

from pyprettier.ast import (
    AstArg,
    AstArguments,
    AstAssign,
    AstAttribute,
    AstAugAssign,
    AstCall,
    AstClassDef,
    AstCompare,
    AstDict,
    AstExpr,
    AstFor,
    AstFunctionDef,
    AstKeyword,
    AstList,
    AstModule,
    AstName,
    AstNameConstant,
    AstNode,
    AstNum,
    AstOperator,
    AstStr,
    AstTuple,
    AstUnsupported,
    OperatorKind,
    node_kind,
)
from pyprettier.doc import (
    Doc,
    concat,
    group,
    hardline,
    indent,
    join,
    line,
    softline,
)
from pyprettier.printer.arguments import merge_arguments
from pyprettier.printer.errors import UnsupportedNodeKind
from pyprettier.printer.path import AstPath, PrintFn

OPERATOR_SYMBOLS: Final[dict[OperatorKind, str]] = {
    OperatorKind.ADD: "+",
    OperatorKind.SUB: "-",
    OperatorKind.MULT: "*",
    OperatorKind.MAT_MULT: "@",
    OperatorKind.DIV: "/",
    OperatorKind.FLOOR_DIV: "//",
    OperatorKind.MOD: "%",
    OperatorKind.POW: "**",
    OperatorKind.L_SHIFT: "<<",
    OperatorKind.R_SHIFT: ">>",
    OperatorKind.BIT_AND: "&",
    OperatorKind.BIT_XOR: "^",
    OperatorKind.BIT_OR: "|",
    OperatorKind.LT: "<",
    OperatorKind.LT_E: "<=",
    OperatorKind.GT: ">",
    OperatorKind.GT_E: ">=",
    OperatorKind.EQ: "==",
    OperatorKind.NOT_EQ: "!=",
}


def print_ast(root: AstNode) -> Doc:
    """Print a whole tree, starting a fresh path at `root`."""

    def print_path(path: AstPath) -> Doc:
        return generic_print(path, print_path)

    return print_path(AstPath.root(root))


def generic_print(path: AstPath, print_fn: PrintFn) -> Doc:
    node = path.node

    match node:
        case AstModule(body=body):
            if not body:
                return ""
            return concat([join(concat([hardline, hardline]), path.map(print_fn, "body")), hardline])

        case AstFunctionDef(name=name):
            return concat(
                [
                    "def ",
                    name,
                    group(
                        concat(
                            [
                                "(",
                                indent(concat([softline, path.call(print_fn, "args")])),
                                softline,
                                ")",
                            ]
                        )
                    ),
                    ":",
                    _print_block(path, print_fn, "body"),
                ]
            )

        case AstArguments():
            return _print_parameters(path, print_fn, node)

        case AstArg(arg=arg):
            return arg

        case AstExpr():
            return path.call(print_fn, "value")

        case AstCall(func=func):
            if not isinstance(func, AstName):
                raise UnsupportedNodeKind(node_kind(func), "call target")
            arguments = [*path.map(print_fn, "args"), *path.map(print_fn, "keywords")]
            return concat([func.id, "(", join(", ", arguments), ")"])

        case AstKeyword(arg=arg):
            if arg is None:
                return concat(["**", path.call(print_fn, "value")])
            return concat([arg, "=", path.call(print_fn, "value")])

        case AstStr(s=s):
            return f'"{s}"'

        case AstNum(n=n):
            return repr(n)

        case AstNameConstant(value=value):
            return str(value)

        case AstName(id=identifier):
            return identifier

        case AstFor(orelse=orelse):
            parts: list[Doc] = [
                "for ",
                path.call(print_fn, "target"),
                " in ",
                path.call(print_fn, "iter"),
                ":",
                _print_block(path, print_fn, "body"),
            ]
            if orelse:
                parts.extend([line, "else:", _print_block(path, print_fn, "orelse")])
            return concat(parts)

        case AstTuple(elts=()):
            return "()"

        case AstTuple():
            items = path.map(print_fn, "elts")
            # A one-element tuple needs its trailing comma.
            elts = concat([items[0], ","]) if len(items) == 1 else join(", ", items)
            if isinstance(path.parent, (AstList, AstTuple)):
                return concat(["(", elts, ")"])
            return elts

        case AstList():
            return concat(["[", join(", ", path.map(print_fn, "elts")), "]"])

        case AstAssign():
            return concat(
                [
                    join(", ", path.map(print_fn, "targets")),
                    " = ",
                    path.call(print_fn, "value"),
                ]
            )

        case AstAugAssign():
            # The operator symbol and "=" are separate tokens with nothing between them.
            return concat(
                [
                    path.call(print_fn, "target"),
                    " ",
                    path.call(print_fn, "op"),
                    "= ",
                    path.call(print_fn, "value"),
                ]
            )

        case AstDict():
            keys = path.map(print_fn, "keys")
            values = path.map(print_fn, "values")
            pairs = [concat([softline, key, ": ", value]) for key, value in zip(keys, values)]
            return group(concat(["{", indent(join(",", pairs)), softline, "}"]))

        case AstClassDef(name=name, bases=bases):
            class_parts: list[Doc] = ["class ", name]
            if bases:
                class_parts.extend(["(", join(",", path.map(print_fn, "bases")), ")"])
            class_parts.extend([":", _print_block(path, print_fn, "body")])
            return concat(class_parts)

        case AstAttribute(attr=attr):
            return concat([path.call(print_fn, "value"), ".", attr])

        case AstOperator(kind=kind):
            symbol = OPERATOR_SYMBOLS.get(kind)
            if symbol is None:
                raise UnsupportedNodeKind(str(kind))
            return symbol

        case AstCompare():
            ops = path.map(print_fn, "ops")
            comparators = path.map(print_fn, "comparators")
            pairs = [concat([" ", op, " ", comparator]) for op, comparator in zip(ops, comparators)]
            return concat([path.call(print_fn, "left"), *pairs])

        case AstUnsupported(kind=kind, detail=detail):
            raise UnsupportedNodeKind(kind, detail)

    raise UnsupportedNodeKind(type(node).__name__)


def _print_parameters(path: AstPath, print_fn: PrintFn, node: AstArguments) -> Doc:
    parts = merge_arguments(path, print_fn, ("posonlyargs", "args"), "defaults")
    if node.posonlyargs:
        parts.insert(len(node.posonlyargs), "/")

    if node.vararg is not None:
        parts.append(concat(["*", path.call(print_fn, "vararg")]))

    if node.kwonlyargs:
        # *args already opens the keyword-only section.
        if node.vararg is None:
            parts.append("*")
        parts.extend(merge_arguments(path, print_fn, ("kwonlyargs",), "kw_defaults"))

    if node.kwarg is not None:
        parts.append(concat(["**", path.call(print_fn, "kwarg")]))

    return join(concat([", ", softline]), parts)


def _print_block(path: AstPath, print_fn: PrintFn, field: str) -> Doc:
    return indent(concat([line, join(hardline, path.map(print_fn, field))]))
