"""Read-only tree model consumed by the transducer."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from typing import List, Sequence, Tuple, Union

from .errors import MalformedNodeError


@dataclass(frozen=True)
class TreeNode:
    name: str
    attributes: Tuple[Tuple[str, str], ...] = ()
    children: Tuple["NodeContent", ...] = ()

    def __post_init__(self) -> None:
        # Accept lists from callers, store tuples so the node stays read-only.
        object.__setattr__(self, "attributes", tuple(tuple(pair) for pair in self.attributes))
        object.__setattr__(self, "children", tuple(self.children))

    def first_child_text(self) -> str | None:
        """Return the first child when it is a text node, otherwise None."""
        if self.children and isinstance(self.children[0], str):
            return self.children[0]
        return None

    @property
    def inline_text(self) -> str | None:
        return self.first_child_text()


NodeContent = Union[TreeNode, str]


def _is_formatting(char: str) -> bool:
    return char.isspace() or unicodedata.category(char) == "Cc"


def is_significant_text(text: str | None) -> bool:
    """True when text holds anything besides whitespace and control characters."""
    if not text:
        return False
    return not all(_is_formatting(char) for char in text)


def element_children(node: TreeNode) -> List[TreeNode]:
    """Return the element children of node in document order.

    Text children are dropped here so callers never have to look past
    indentation to find the next or last sibling element.
    """
    elements: List[TreeNode] = []
    for child in node.children:
        if isinstance(child, TreeNode):
            if not child.name:
                raise MalformedNodeError(f"<{node.name}> has an element child without a name")
            elements.append(child)
        elif not isinstance(child, str):
            raise MalformedNodeError(
                f"<{node.name}> has a child of unsupported type {type(child).__name__}"
            )
    return elements


def element(name: str, *children: NodeContent, attrs: Sequence[Tuple[str, str]] = ()) -> TreeNode:
    """Shorthand for building trees by hand."""
    return TreeNode(name=name, attributes=tuple(attrs), children=children)
