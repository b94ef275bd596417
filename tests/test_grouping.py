import pytest

from treejson.grouping import classify_run, group_siblings
from treejson.node_model import element


def test_repeated_first_name_is_grouped() -> None:
    siblings = [element("item", "1"), element("item", "2")]
    group, remaining = classify_run(siblings)
    assert group.name == "item"
    assert group.grouped
    assert list(group.members) == siblings
    assert remaining == []


def test_unique_first_name_is_not_grouped() -> None:
    siblings = [element("a"), element("b")]
    group, remaining = classify_run(siblings)
    assert group.name == "a"
    assert not group.grouped
    assert [node.name for node in remaining] == ["b"]


def test_names_are_compared_by_value() -> None:
    first = element("".join(["it", "em"]))
    second = element("".join(["i", "tem"]))
    group, _ = classify_run([first, second])
    assert group.grouped
    assert len(group.members) == 2


def test_interleaved_names_group_anywhere_in_run() -> None:
    a1, b, a2 = element("a", "1"), element("b"), element("a", "2")
    groups = group_siblings([a1, b, a2])
    assert [(group.name, group.members) for group in groups] == [("a", (a1, a2)), ("b", (b,))]


def test_groups_keep_first_occurrence_order() -> None:
    nodes = [element("c"), element("a"), element("b"), element("a"), element("c")]
    groups = group_siblings(nodes)
    assert [group.name for group in groups] == ["c", "a", "b"]
    assert [len(group.members) for group in groups] == [2, 2, 1]


def test_empty_run() -> None:
    assert group_siblings([]) == []
    with pytest.raises(ValueError):
        classify_run([])
