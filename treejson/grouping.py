"""Split sibling elements into named arrays and single keyed entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .node_model import TreeNode


@dataclass(frozen=True)
class SiblingGroup:
    name: str
    members: Tuple[TreeNode, ...]

    @property
    def grouped(self) -> bool:
        return len(self.members) > 1


def classify_run(siblings: Sequence[TreeNode]) -> Tuple[SiblingGroup, List[TreeNode]]:
    """Pull out every sibling named like the first one.

    Returns the group and the siblings left over, in their original order.
    Names are compared by value.
    """
    if not siblings:
        raise ValueError("cannot classify an empty sibling run")
    first_name = siblings[0].name
    matching: List[TreeNode] = []
    remaining: List[TreeNode] = []
    for sibling in siblings:
        if sibling.name == first_name:
            matching.append(sibling)
        else:
            remaining.append(sibling)
    return SiblingGroup(name=first_name, members=tuple(matching)), remaining


def group_siblings(siblings: Sequence[TreeNode]) -> List[SiblingGroup]:
    groups: List[SiblingGroup] = []
    remaining = list(siblings)
    while remaining:
        group, remaining = classify_run(remaining)
        groups.append(group)
    return groups
