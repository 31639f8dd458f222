"""Typed, immutable AST for the subset of Python the printer understands.

Every node carries a `col_offset`: its byte offset from the start of the source, so
sorting by it follows source order across lines. The printer only uses it to pair
parameters with their default values; it never affects spacing.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class OperatorKind(StrEnum):
    """Binary and comparison operator tags, named after `ast` operator classes."""

    ADD = "Add"
    SUB = "Sub"
    MULT = "Mult"
    MAT_MULT = "MatMult"
    DIV = "Div"
    FLOOR_DIV = "FloorDiv"
    MOD = "Mod"
    POW = "Pow"
    L_SHIFT = "LShift"
    R_SHIFT = "RShift"
    BIT_AND = "BitAnd"
    BIT_XOR = "BitXor"
    BIT_OR = "BitOr"
    LT = "Lt"
    LT_E = "LtE"
    GT = "Gt"
    GT_E = "GtE"
    EQ = "Eq"
    NOT_EQ = "NotEq"


@dataclass(frozen=True, slots=True)
class AstModule:
    body: tuple[AstNode, ...]
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstFunctionDef:
    name: str
    args: AstArguments
    body: tuple[AstNode, ...]
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstArguments:
    """Parameter list; defaults are stored apart from the parameters they belong to."""

    args: tuple[AstArg, ...] = ()
    defaults: tuple[AstNode, ...] = ()
    vararg: AstArg | None = None
    kwonlyargs: tuple[AstArg, ...] = ()
    kw_defaults: tuple[AstNode, ...] = ()
    kwarg: AstArg | None = None
    posonlyargs: tuple[AstArg, ...] = ()
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstArg:
    arg: str
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstExpr:
    """Expression used as a statement."""

    value: AstNode
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstCall:
    func: AstNode
    args: tuple[AstNode, ...] = ()
    keywords: tuple[AstKeyword, ...] = ()
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstKeyword:
    """Keyword argument of a call; `arg` is None for `**mapping`."""

    arg: str | None
    value: AstNode
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstStr:
    s: str
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstNum:
    n: int | float | complex
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstNameConstant:
    value: bool | None
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstName:
    id: str
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstFor:
    target: AstNode
    iter: AstNode
    body: tuple[AstNode, ...]
    orelse: tuple[AstNode, ...] = ()
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstTuple:
    elts: tuple[AstNode, ...]
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstList:
    elts: tuple[AstNode, ...]
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstAssign:
    targets: tuple[AstNode, ...]
    value: AstNode
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstAugAssign:
    target: AstNode
    op: AstNode
    value: AstNode
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstDict:
    keys: tuple[AstNode, ...]
    values: tuple[AstNode, ...]
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstClassDef:
    name: str
    bases: tuple[AstNode, ...]
    body: tuple[AstNode, ...]
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstAttribute:
    value: AstNode
    attr: str
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstCompare:
    """Chained comparison: `left op[0] comparators[0] op[1] comparators[1] ...`."""

    left: AstNode
    ops: tuple[AstNode, ...]
    comparators: tuple[AstNode, ...]
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstOperator:
    kind: OperatorKind
    col_offset: int = 0


@dataclass(frozen=True, slots=True)
class AstUnsupported:
    """Construct retained during lowering by kind only; printing it fails."""

    kind: str
    detail: str | None = None
    col_offset: int = 0


type AstNode = (
    AstModule
    | AstFunctionDef
    | AstArguments
    | AstArg
    | AstExpr
    | AstCall
    | AstKeyword
    | AstStr
    | AstNum
    | AstNameConstant
    | AstName
    | AstFor
    | AstTuple
    | AstList
    | AstAssign
    | AstAugAssign
    | AstDict
    | AstClassDef
    | AstAttribute
    | AstCompare
    | AstOperator
    | AstUnsupported
)


def node_kind(node: AstNode) -> str:
    """Parser-facing kind name of a node, e.g. `"FunctionDef"` or `"Lt"`."""
    if isinstance(node, (AstOperator, AstUnsupported)):
        return str(node.kind)
    if isinstance(node, AstArguments):
        return "arguments"
    if isinstance(node, (AstArg, AstKeyword)):
        return type(node).__name__.removeprefix("Ast").lower()
    return type(node).__name__.removeprefix("Ast")


__all__ = [
    "AstArg",
    "AstArguments",
    "AstAssign",
    "AstAttribute",
    "AstAugAssign",
    "AstCall",
    "AstClassDef",
    "AstCompare",
    "AstDict",
    "AstExpr",
    "AstFor",
    "AstFunctionDef",
    "AstKeyword",
    "AstList",
    "AstModule",
    "AstName",
    "AstNameConstant",
    "AstNode",
    "AstNum",
    "AstOperator",
    "AstStr",
    "AstTuple",
    "AstUnsupported",
    "OperatorKind",
    "node_kind",
]
