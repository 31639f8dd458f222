"""Node printer: Python AST to document IR."""

from pyprettier.printer.arguments import merge_arguments, merge_parameter_nodes
from pyprettier.printer.errors import UnsupportedNodeKind
from pyprettier.printer.path import AstPath, PrintFn
from pyprettier.printer.python import OPERATOR_SYMBOLS, generic_print, print_ast

__all__ = [
    "OPERATOR_SYMBOLS",
    "AstPath",
    "PrintFn",
    "UnsupportedNodeKind",
    "generic_print",
    "merge_arguments",
    "merge_parameter_nodes",
    "print_ast",
]
