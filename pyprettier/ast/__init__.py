"""Typed AST over CPython's `ast` module."""

from pyprettier.ast.lower import lower_module, lower_node, parse_to_ast
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
    node_kind,
)

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
    "lower_module",
    "lower_node",
    "parse_to_ast",
]
