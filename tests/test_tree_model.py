"""Tests for the JSON tree model in tablux/model/tree.py."""

from __future__ import annotations

import gc

import pytest

from tablux.model import MAX_TREE_DEPTH, NodeKind, TreeNode, format_number, kind_of


class TestKindOf:
    """Tests for kind_of()."""

    @pytest.mark.parametrize(
        "value, kind",
        [
            ({}, NodeKind.OBJECT),
            ([], NodeKind.ARRAY),
            ("x", NodeKind.STRING),
            (3, NodeKind.NUMBER),
            (2.5, NodeKind.NUMBER),
            (True, NodeKind.BOOLEAN),
            (False, NodeKind.BOOLEAN),
            (None, NodeKind.NULL),
        ],
    )
    def test_maps_decoded_values(self, value, kind):
        assert kind_of(value) is kind

    def test_rejects_non_json_values(self):
        with pytest.raises(TypeError):
            kind_of(object())


class TestFromValue:
    """Tests for building trees with TreeNode.from_value()."""

    def test_object_children_keep_document_order(self):
        root = TreeNode.from_value("root", {"z": 1, "a": 2, "m": 3})
        assert [child.key for child in root.children] == ["z", "a", "m"]

    def test_array_elements_have_empty_keys(self):
        root = TreeNode.from_value("root", [10, 20])
        assert [child.key for child in root.children] == ["", ""]
        assert [child.value for child in root.children] == [10, 20]

    def test_containers_carry_no_scalar_value(self):
        root = TreeNode.from_value("root", {"a": [1]})
        assert root.value is None
        assert root.children[0].value is None

    def test_paths(self):
        root = TreeNode.from_value("root", {"a": 1, "b": [1, {"c": None}]})
        a, b = root.children
        assert root.path == ""
        assert a.path == "a"
        assert b.path == "b"
        assert b.children[0].path == "b[0]"
        assert b.children[1].children[0].path == "b[1].c"

    def test_everything_starts_expanded(self, nested_tree):
        assert all(node.expanded for node in nested_tree.walk())

    def test_depth_limit(self):
        value: list = []
        for _ in range(MAX_TREE_DEPTH + 5):
            value = [value]
        with pytest.raises(ValueError, match="nesting"):
            TreeNode.from_value("root", value)


class TestRelations:
    """Tests for parent links and sibling position."""

    def test_parent_and_root(self, scenario_tree):
        a = scenario_tree.children[0]
        assert scenario_tree.is_root
        assert scenario_tree.parent is None
        assert a.parent is scenario_tree
        assert not a.is_root

    def test_parent_link_is_weak(self):
        root = TreeNode.from_value("root", {"a": 1})
        child = root.children[0]
        del root
        gc.collect()
        assert child.parent is None

    def test_is_last_child(self, scenario_tree):
        a, b = scenario_tree.children
        assert not a.is_last_child
        assert b.is_last_child
        assert scenario_tree.is_last_child

    def test_depth_and_ancestors(self, scenario_tree):
        item = scenario_tree.children[1].children[0]
        assert item.depth == 2
        assert list(item.ancestors()) == [scenario_tree.children[1], scenario_tree]

    def test_walk_is_pre_order(self, scenario_tree):
        keys = [(node.key, node.value) for node in scenario_tree.walk()]
        assert keys == [("root", None), ("a", 1), ("b", None), ("", 1), ("", 2)]


class TestToggle:
    """Tests for the expanded flag."""

    def test_toggle_container(self, scenario_tree):
        b = scenario_tree.children[1]
        b.toggle()
        assert b.expanded is False
        b.toggle()
        assert b.expanded is True

    def test_toggle_scalar_is_noop(self, scenario_tree):
        a = scenario_tree.children[0]
        a.toggle()
        assert a.expanded is True

    def test_set_expanded_recursive(self, nested_tree):
        nested_tree.set_expanded_recursive(False)
        assert all(not node.expanded for node in nested_tree.walk() if node.has_children)
        nested_tree.set_expanded_recursive(True)
        assert all(node.expanded for node in nested_tree.walk())


class TestDisplayValue:
    """Tests for display_value() and format_number()."""

    def test_scalars(self):
        root = TreeNode.from_value("root", ["s", 2.0, 1.5, 7, True, False, None])
        assert [child.display_value() for child in root.children] == [
            "s", "2", "1.5", "7", "true", "false", "null",
        ]

    def test_containers(self):
        root = TreeNode.from_value("root", {"o": {"k": 1}, "e": {}, "a": [1], "n": []})
        assert [child.display_value() for child in root.children] == [
            "{...}", "{}", "[...]", "[]",
        ]

    def test_format_number(self):
        assert format_number(3) == "3"
        assert format_number(3.0) == "3"
        assert format_number(-0.25) == "-0.25"
        assert format_number(1e20) == "1e+20"
        assert format_number(float("nan")) == "NaN"
        assert format_number(float("inf")) == "Infinity"
        assert format_number(float("-inf")) == "-Infinity"

    def test_type_name(self, nested_tree):
        assert nested_tree.type_name == "object"
        assert nested_tree.children[0].type_name == "string"
