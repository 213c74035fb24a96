"""Tests for arrkit/hierarchy/traversal.py"""

from typing import Iterator

import pytest

from arrkit.hierarchy import (
    build_tree,
    children_of,
    depth_first_preorder,
    find_cycles,
    iter_subtree,
    to_nested,
)


RAW = [
    {"id": 1, "parent_id": None, "name": "root1"},
    {"id": 11, "parent_id": 1, "name": "child11"},
    {"id": 12, "parent_id": 1, "name": "child12"},
    {"id": 111, "parent_id": 11, "name": "child111"},
]

LOOP = [
    {"id": 1, "parent_id": 11, "name": "loop1"},
    {"id": 11, "parent_id": 1, "name": "loop11"},
]


class TestDepthFirstPreorder:
    def test_none_root(self):
        assert list(depth_first_preorder(lambda n: iter(()), None)) == []

    def test_adjacency(self):
        """
        Tree structure:
              A
             / \\
            B   C
           /
          D
        """
        graph = {"A": ["B", "C"], "B": ["D"], "C": [], "D": []}

        def after(node: str) -> Iterator[str]:
            return iter(graph[node])

        assert list(depth_first_preorder(after, "A")) == ["A", "B", "D", "C"]


class TestIterSubtree:
    def test_preorder(self):
        tree = build_tree(RAW)
        assert [node["id"] for node in iter_subtree(tree.all[1])] == [1, 11, 111, 12]

    def test_leaf(self):
        tree = build_tree(RAW)
        assert [node["id"] for node in iter_subtree(tree.all[111])] == [111]

    def test_positional_children(self):
        tree = build_tree(RAW, alias_field=None)
        assert [node["id"] for node in iter_subtree(tree.all[1])] == [1, 11, 111, 12]

    def test_custom_children_field(self):
        tree = build_tree(RAW, children_field="kids")
        assert [node["id"] for node in iter_subtree(tree.all[11], "kids")] == [11, 111]

    def test_terminates_on_loop(self):
        tree = build_tree(LOOP)
        assert [node["id"] for node in iter_subtree(tree.all[1])] == [1, 11]

    def test_children_of(self):
        tree = build_tree(RAW)
        assert [node["id"] for node in children_of(tree.all[1])] == [11, 12]
        assert list(children_of(tree.all[12])) == []


class TestFindCycles:
    def test_chain(self):
        assert find_cycles({1: None, 2: 1, 3: 2}) == ()

    def test_empty(self):
        assert find_cycles({}) == ()

    def test_two_cycle(self):
        assert find_cycles({1: 11, 11: 1}) == ((1, 11),)

    def test_three_cycle(self):
        assert find_cycles({2: 222, 22: 2, 222: 22}) == ((2, 222, 22),)

    def test_self_loop(self):
        assert find_cycles({7: 7}) == ((7,),)

    def test_descendant_of_cycle_excluded(self):
        """5 hangs off the 1-11 loop but is not part of it."""
        assert find_cycles({5: 1, 1: 11, 11: 1}) == ((1, 11),)

    def test_unknown_parent(self):
        assert find_cycles({1: 99, 2: 1}) == ()

    def test_several_cycles(self):
        structure = build_tree(
            LOOP
            + [
                {"id": 2, "parent_id": 222, "name": "loop2"},
                {"id": 22, "parent_id": 2, "name": "loop22"},
                {"id": 222, "parent_id": 22, "name": "loop222"},
                {"id": 3, "parent_id": None, "name": "root"},
            ]
        ).structure
        assert find_cycles(structure) == ((1, 11), (2, 222, 22))


class TestToNested:
    def test_copy(self):
        tree = build_tree(RAW)
        nested = to_nested(tree.all[11])
        assert nested == {
            "id": 11,
            "parent_id": 1,
            "name": "child11",
            "_children": {
                "child111": {"id": 111, "parent_id": 11, "name": "child111"},
            },
        }

    def test_detached(self):
        tree = build_tree(RAW)
        nested = to_nested(tree.all[1])
        nested["_children"]["child11"]["name"] = "changed"
        assert tree.all[11]["name"] == "child11"
        assert nested["_children"]["child11"] is not tree.all[11]

    def test_positional(self):
        tree = build_tree(RAW, alias_field=None)
        nested = to_nested(tree.all[1])
        assert [child["id"] for child in nested["_children"]] == [11, 12]
        assert nested["_children"][0]["_children"][0]["id"] == 111

    def test_cycle(self):
        tree = build_tree(LOOP)
        with pytest.raises(ValueError, match="cycle"):
            to_nested(tree.all[1])
