"""Decide how a single node serializes: object, string leaf or null."""

from __future__ import annotations

from typing import Literal

from .node_model import TreeNode, element_children, is_significant_text

ContentKind = Literal["object", "string", "null"]


def classify_content(node: TreeNode) -> ContentKind:
    if element_children(node):
        return "object"
    if node.attributes:
        return "object"
    if is_significant_text(node.first_child_text()):
        return "string"
    return "null"
