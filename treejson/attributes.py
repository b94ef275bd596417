"""Attribute pairs for object-classified nodes."""

from __future__ import annotations

from typing import List, Tuple

from .node_model import TreeNode


def attribute_members(node: TreeNode) -> List[Tuple[str, str]]:
    # Order and repeated keys are kept as the parser reported them.
    return [(key, value) for key, value in node.attributes]
