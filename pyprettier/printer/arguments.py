"""Pair parameters with their default values.

Python's AST keeps parameters and defaults in two separate lists with no link between
them: a default belongs to the parameter it follows in the source. Both lists are
merged and sorted by source offset; walking the result, a parameter immediately
followed by a non-parameter node takes that node as its default.
"""

from __future__ import annotations

from collections.abc import Sequence

from pyprettier.ast import AstArg, AstNode
from pyprettier.doc import Doc, concat
from pyprettier.printer.path import AstPath, PrintFn


def merge_parameter_nodes(
    params: Sequence[AstNode],
    defaults: Sequence[AstNode],
) -> list[tuple[int, int | None]]:
    """Return `(param_index, default_index)` pairs, one per parameter.

    Ties on offset keep parameters ahead of defaults. The walk stops once every
    parameter has a fragment, so defaults that sort out of place are left unpaired.
    """
    merged = sorted([*params, *defaults], key=lambda node: node.col_offset)

    pairs: list[tuple[int, int | None]] = []
    current_param = 0
    current_default = 0
    position = 0
    while position < len(merged) and current_param < len(params):
        upcoming = merged[position + 1] if position + 1 < len(merged) else None
        if upcoming is not None and not isinstance(upcoming, AstArg):
            pairs.append((current_param, current_default))
            current_default += 1
            position += 1
        else:
            pairs.append((current_param, None))
        current_param += 1
        position += 1
    return pairs


def merge_arguments(
    path: AstPath,
    print_fn: PrintFn,
    params_fields: Sequence[str],
    defaults_field: str,
) -> list[Doc]:
    """Print the parameters stored in `params_fields`, each with its default if any."""
    node = path.node
    addresses = [
        (field, index)
        for field in params_fields
        for index in range(len(getattr(node, field)))
    ]
    params = [getattr(node, field)[index] for field, index in addresses]
    defaults = getattr(node, defaults_field)

    parts: list[Doc] = []
    for param_index, default_index in merge_parameter_nodes(params, defaults):
        field, index = addresses[param_index]
        part: list[Doc] = [path.call(print_fn, field, index)]
        if default_index is not None:
            part.extend(["=", path.call(print_fn, defaults_field, default_index)])
        parts.append(concat(part))
    return parts
