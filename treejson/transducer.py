"""Recursive transducer from a document tree to intermediate JSON values.

The walk is pre-order. At each level the element children are pulled out
(text between elements never reaches the grouping step), split into sibling
groups, and every member is classified as object, string leaf or null.
Nothing here writes output or keeps state between calls; punctuation is left
entirely to :mod:`treejson.writer`.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .attributes import attribute_members
from .content import classify_content
from .errors import InputUnavailableError
from .grouping import group_siblings
from .models import ConvertOptions
from .node_model import TreeNode, element_children
from .values import JsonArray, JsonObject, JsonValue

Member = Tuple[str, JsonValue]


def transduce(root: Optional[TreeNode], options: ConvertOptions | None = None) -> JsonObject:
    """Build the top-level object for root.

    The root's own name is not emitted: its attributes and element children
    become the members of the outermost object. Pass the document node (as
    produced by :func:`treejson.tree_builder.parse_document`) to get
    ``{"<root element>": ...}``.
    """
    if root is None:
        raise InputUnavailableError("no document root to convert")
    options = options or ConvertOptions()
    return JsonObject(members=tuple(_object_members(root, options)))


def node_value(node: TreeNode, options: ConvertOptions) -> JsonValue:
    kind = classify_content(node)
    if kind == "object":
        return JsonObject(members=tuple(_object_members(node, options)))
    if kind == "string":
        text = node.first_child_text() or ""
        return text.strip() if options.strip_text else text
    return None


def sibling_members(siblings: Sequence[TreeNode], options: ConvertOptions) -> List[Member]:
    members: List[Member] = []
    for group in group_siblings(siblings):
        if group.grouped:
            items = tuple(node_value(member, options) for member in group.members)
            members.append((group.name, JsonArray(items=items)))
        else:
            members.append((group.name, node_value(group.members[0], options)))
    return members


def _object_members(node: TreeNode, options: ConvertOptions) -> List[Member]:
    members: List[Member] = list(attribute_members(node))
    members.extend(sibling_members(element_children(node), options))
    return members
