"""Immutable traversal cursor handed to the node printer."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from pyprettier.ast import AstNode
    from pyprettier.doc import Doc


type PrintFn = Callable[[AstPath], Doc]


@dataclass(frozen=True, slots=True)
class AstPath:
    """Current node plus the chain of ancestors leading to it.

    Each child access builds a new path, so sibling calls never share a cursor.
    """

    node: AstNode
    parent_path: AstPath | None = None

    @staticmethod
    def root(node: AstNode) -> AstPath:
        return AstPath(node=node)

    @property
    def parent(self) -> AstNode | None:
        if self.parent_path is None:
            return None
        return self.parent_path.node

    def child(self, field: str, index: int | None = None) -> AstPath:
        value: Any = getattr(self.node, field)
        if index is not None:
            value = value[index]
        if value is None:
            raise ValueError(f"Field {field!r} of {type(self.node).__name__} is empty")
        return AstPath(node=value, parent_path=self)

    def call(self, print_fn: PrintFn, field: str, index: int | None = None) -> Doc:
        """Print the child stored in `field` (or its `index`-th element)."""
        return print_fn(self.child(field, index))

    def map(self, print_fn: PrintFn, field: str) -> list[Doc]:
        """Print every element of the sequence stored in `field`, in order."""
        children = getattr(self.node, field)
        return [print_fn(self.child(field, index)) for index in range(len(children))]
