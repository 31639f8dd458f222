"""Lower CPython `ast` trees into the printer's typed AST.

CPython reports `col_offset` per line. Lowering turns it into an offset from the start
of the source (`line start + col_offset`, both in UTF-8 bytes), so ordering by
`col_offset` is source order even when a construct spans several lines.
"""

from __future__ import annotations

import ast
from collections.abc import Sequence

from pyprettier.ast.model import (
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
)

_OPERATOR_KINDS: frozenset[str] = frozenset(kind.value for kind in OperatorKind)

type LineStarts = Sequence[int]


def parse_to_ast(text: str) -> AstModule:
    return lower_module(ast.parse(text), text)


def lower_module(module: ast.Module, text: str) -> AstModule:
    starts = line_starts(text)
    return AstModule(body=_lower_body(module.body, starts))


def line_starts(text: str) -> tuple[int, ...]:
    """Byte offset of every line start, indexed by `lineno - 1`."""
    starts = [0]
    for raw_line in text.encode("utf-8").splitlines(keepends=True):
        starts.append(starts[-1] + len(raw_line))
    return tuple(starts)


def source_offset(node: ast.AST, starts: LineStarts = ()) -> int:
    col_offset = getattr(node, "col_offset", 0)
    lineno = getattr(node, "lineno", None)
    if lineno is None or not 0 < lineno <= len(starts):
        return col_offset
    return starts[lineno - 1] + col_offset


def lower_node(node: ast.AST, starts: LineStarts = ()) -> AstNode:
    col_offset = source_offset(node, starts)

    match node:
        case ast.FunctionDef():
            if node.decorator_list:
                return AstUnsupported(kind="FunctionDef", detail="decorators", col_offset=col_offset)
            if getattr(node, "type_params", None):
                return AstUnsupported(kind="FunctionDef", detail="type parameters", col_offset=col_offset)
            if node.returns is not None:
                return AstUnsupported(kind="FunctionDef", detail="return annotation", col_offset=col_offset)
            if _has_annotations(node.args):
                return AstUnsupported(kind="FunctionDef", detail="parameter annotations", col_offset=col_offset)
            return AstFunctionDef(
                name=node.name,
                args=_lower_arguments(node.args, starts),
                body=_lower_body(node.body, starts),
                col_offset=col_offset,
            )

        case ast.ClassDef():
            if node.decorator_list:
                return AstUnsupported(kind="ClassDef", detail="decorators", col_offset=col_offset)
            if node.keywords:
                return AstUnsupported(kind="ClassDef", detail="class keywords", col_offset=col_offset)
            if getattr(node, "type_params", None):
                return AstUnsupported(kind="ClassDef", detail="type parameters", col_offset=col_offset)
            return AstClassDef(
                name=node.name,
                bases=_lower_sequence(node.bases, starts),
                body=_lower_body(node.body, starts),
                col_offset=col_offset,
            )

        case ast.Expr():
            return AstExpr(value=lower_node(node.value, starts), col_offset=col_offset)

        case ast.Call():
            return AstCall(
                func=lower_node(node.func, starts),
                args=_lower_sequence(node.args, starts),
                keywords=tuple(_lower_keyword(keyword, starts) for keyword in node.keywords),
                col_offset=col_offset,
            )

        case ast.Constant():
            return _lower_constant(node, col_offset)

        case ast.Name():
            return AstName(id=node.id, col_offset=col_offset)

        case ast.For():
            return AstFor(
                target=lower_node(node.target, starts),
                iter=lower_node(node.iter, starts),
                body=_lower_body(node.body, starts),
                orelse=_lower_body(node.orelse, starts),
                col_offset=col_offset,
            )

        case ast.Tuple():
            return AstTuple(elts=_lower_sequence(node.elts, starts), col_offset=col_offset)

        case ast.List():
            return AstList(elts=_lower_sequence(node.elts, starts), col_offset=col_offset)

        case ast.Assign():
            return AstAssign(
                targets=_lower_sequence(node.targets, starts),
                value=lower_node(node.value, starts),
                col_offset=col_offset,
            )

        case ast.AugAssign():
            return AstAugAssign(
                target=lower_node(node.target, starts),
                op=_lower_operator(node.op),
                value=lower_node(node.value, starts),
                col_offset=col_offset,
            )

        case ast.Dict():
            if any(key is None for key in node.keys):
                return AstUnsupported(kind="Dict", detail="dictionary unpacking", col_offset=col_offset)
            return AstDict(
                keys=_lower_sequence([key for key in node.keys if key is not None], starts),
                values=_lower_sequence(node.values, starts),
                col_offset=col_offset,
            )

        case ast.Attribute():
            return AstAttribute(value=lower_node(node.value, starts), attr=node.attr, col_offset=col_offset)

        case ast.Compare():
            return AstCompare(
                left=lower_node(node.left, starts),
                ops=tuple(_lower_operator(op) for op in node.ops),
                comparators=_lower_sequence(node.comparators, starts),
                col_offset=col_offset,
            )

    return AstUnsupported(kind=type(node).__name__, col_offset=col_offset)


def _lower_body(statements: list[ast.stmt], starts: LineStarts) -> tuple[AstNode, ...]:
    return tuple(lower_node(statement, starts) for statement in statements)


def _lower_sequence(nodes: list[ast.expr], starts: LineStarts) -> tuple[AstNode, ...]:
    return tuple(lower_node(node, starts) for node in nodes)


def _has_annotations(node: ast.arguments) -> bool:
    params = [*node.posonlyargs, *node.args, *node.kwonlyargs]
    if node.vararg is not None:
        params.append(node.vararg)
    if node.kwarg is not None:
        params.append(node.kwarg)
    return any(param.annotation is not None for param in params)


def _lower_arguments(node: ast.arguments, starts: LineStarts) -> AstArguments:
    # `kw_defaults` holds None for keyword-only parameters without a default.
    return AstArguments(
        posonlyargs=tuple(_lower_arg(arg, starts) for arg in node.posonlyargs),
        args=tuple(_lower_arg(arg, starts) for arg in node.args),
        defaults=_lower_sequence(node.defaults, starts),
        vararg=_lower_arg(node.vararg, starts) if node.vararg is not None else None,
        kwonlyargs=tuple(_lower_arg(arg, starts) for arg in node.kwonlyargs),
        kw_defaults=tuple(
            lower_node(default, starts) for default in node.kw_defaults if default is not None
        ),
        kwarg=_lower_arg(node.kwarg, starts) if node.kwarg is not None else None,
    )


def _lower_arg(node: ast.arg, starts: LineStarts) -> AstArg:
    return AstArg(arg=node.arg, col_offset=source_offset(node, starts))


def _lower_keyword(node: ast.keyword, starts: LineStarts) -> AstKeyword:
    return AstKeyword(
        arg=node.arg,
        value=lower_node(node.value, starts),
        col_offset=source_offset(node, starts),
    )


def _lower_constant(node: ast.Constant, col_offset: int) -> AstNode:
    value = node.value
    if value is None or isinstance(value, bool):
        return AstNameConstant(value=value, col_offset=col_offset)
    if isinstance(value, str):
        return AstStr(s=value, col_offset=col_offset)
    if isinstance(value, (int, float, complex)):
        return AstNum(n=value, col_offset=col_offset)
    return AstUnsupported(kind="Constant", detail=type(value).__name__, col_offset=col_offset)


def _lower_operator(node: ast.AST) -> AstNode:
    kind = type(node).__name__
    if kind in _OPERATOR_KINDS:
        return AstOperator(kind=OperatorKind(kind))
    return AstUnsupported(kind=kind)
