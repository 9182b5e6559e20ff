"""Tests for the tree viewer in tablux/tui/viewers/tree_viewer.py."""

from __future__ import annotations

import random

from tablux.data_formats import JSONParser
from tablux.tui.theme import DEFAULT_THEME
from tablux.tui.viewers import TreeViewer
from tablux.tui.viewers.tree_viewer import pluralize


def lines(viewer: TreeViewer) -> list[str]:
    """Helper to get the plain text rows of a rendered frame."""
    return viewer.render().plain.split("\n")


class TestRender:
    """Tests for row formatting and guides."""

    def test_fully_expanded_document(self, scenario_tree):
        viewer = TreeViewer(scenario_tree)
        assert lines(viewer) == [
            "▼ {",
            '  "a": 1',
            '▼ "b": [',
            "    1",
            "    2",
        ]

    def test_collapsed_container_shows_item_count(self, scenario_tree):
        viewer = TreeViewer(scenario_tree)
        viewer.move_down()
        viewer.move_down()
        viewer.toggle_current()
        assert lines(viewer) == ["▼ {", '  "a": 1', '► "b": [ 2 items ]']

    def test_single_item_is_not_pluralized(self):
        viewer = TreeViewer(JSONParser().parse(b'{"x": {"y": 1}}'))
        viewer.move_down()
        viewer.toggle_current()
        assert lines(viewer)[1] == '► "x": { 1 item }'

    def test_pipe_guides_for_ancestors_with_later_siblings(self):
        viewer = TreeViewer(JSONParser().parse(b'{"x": [1], "y": 2}'))
        assert lines(viewer) == [
            "▼ {",
            '▼ "x": [',
            "│   1",
            '  "y": 2',
        ]

    def test_scalar_kinds(self, nested_tree):
        rendered = lines(TreeViewer(nested_tree))
        assert '  "name": "tablux"' in rendered
        assert '  "version": 2' in rendered
        assert '  "ratio": 0.5' in rendered
        assert '  "stable": true' in rendered
        assert '  "license": null' in rendered
        assert '  "meta": {}' in rendered

    def test_strings_are_escaped(self):
        viewer = TreeViewer(JSONParser().parse(b'{"s": "tab\\there \\"q\\""}'))
        assert lines(viewer)[1] == '  "s": "tab\\there \\"q\\""'

    def test_empty_containers_render_closed(self):
        viewer = TreeViewer(JSONParser().parse(b'{"o": {}, "a": []}'))
        assert lines(viewer) == ["▼ {", '  "o": {}', '  "a": []']
        viewer.move_down()
        viewer.toggle_current()
        assert not viewer.current_node.has_children
        assert lines(viewer)[1] == '  "o": {}'

    def test_array_elements_have_no_key_prefix(self):
        viewer = TreeViewer(JSONParser().parse(b'[true, "x"]'))
        assert lines(viewer) == ["▼ [", "  true", '  "x"']

    def test_selected_row_is_highlighted(self, scenario_tree):
        viewer = TreeViewer(scenario_tree)
        viewer.move_down()
        text = viewer.render()
        selected = [span for span in text.spans if span.style == DEFAULT_THEME.selected_node]
        assert len(selected) == 1
        start = len("▼ {\n")
        assert selected[0].start == start
        assert selected[0].end == start + len('  "a": 1')


class TestToggle:
    """Tests for expanding and collapsing."""

    def test_toggle_on_leaf_does_nothing(self, scenario_tree):
        viewer = TreeViewer(scenario_tree)
        viewer.move_down()
        before = lines(viewer)
        viewer.toggle_current()
        assert lines(viewer) == before

    def test_toggle_flips_only_current_node(self, nested_tree):
        viewer = TreeViewer(nested_tree)
        node = nested_tree.children[5]
        viewer.cursor = viewer.visible_nodes.index(node)
        states = {n.path: n.expanded for n in nested_tree.walk()}
        viewer.toggle_current()
        after = {n.path: n.expanded for n in nested_tree.walk()}
        changed = [path for path in states if states[path] != after[path]]
        assert changed == [node.path]

    def test_collapse_all_then_expand_all_restores_rows(self, nested_tree):
        viewer = TreeViewer(nested_tree)
        expanded = lines(viewer)
        viewer.collapse_all()
        assert lines(viewer) == ["► { 7 items }"]
        assert viewer.cursor == 0
        viewer.expand_all()
        assert lines(viewer) == expanded

    def test_cursor_keeps_position_when_list_shrinks(self, scenario_tree):
        viewer = TreeViewer(scenario_tree)
        viewer.move_bottom()
        assert viewer.cursor == 4
        viewer.collapse_all()
        assert viewer.cursor == 0

    def test_collapsed_parent_hides_expanded_descendants(self, nested_tree):
        viewer = TreeViewer(nested_tree)
        authors = nested_tree.children[5]
        viewer.cursor = viewer.visible_nodes.index(authors)
        viewer.toggle_current()
        assert all(node.parent is not authors for node in viewer.visible_nodes)
        assert authors.children[0].expanded


class TestNavigation:
    """Tests for cursor movement and the viewport."""

    def test_moves_are_clamped(self, scenario_tree):
        viewer = TreeViewer(scenario_tree)
        viewer.move_up()
        assert viewer.cursor == 0
        for _ in range(10):
            viewer.move_down()
        assert viewer.cursor == 4
        viewer.move_top()
        assert viewer.cursor == 0

    def test_viewport_follows_cursor(self, nested_tree):
        viewer = TreeViewer(nested_tree, viewport_height=3)
        for _ in range(5):
            viewer.move_down()
        assert viewer.cursor == 5
        assert viewer.viewport_y == 3
        assert len(lines(viewer)) == 3
        viewer.move_top()
        assert viewer.viewport_y == 0

    def test_viewport_height_is_at_least_one(self, scenario_tree):
        viewer = TreeViewer(scenario_tree)
        viewer.set_viewport_height(-2)
        assert viewer.viewport_height == 1
        viewer.move_down()
        assert lines(viewer) == ['  "a": 1']

    def test_cursor_stays_valid_under_random_commands(self, nested_tree):
        rng = random.Random(7)
        viewer = TreeViewer(nested_tree, viewport_height=4)
        commands = [
            viewer.move_up,
            viewer.move_down,
            viewer.move_top,
            viewer.move_bottom,
            viewer.toggle_current,
            viewer.expand_all,
            viewer.collapse_all,
        ]
        for _ in range(300):
            rng.choice(commands)()
            assert 0 <= viewer.cursor < len(viewer.visible_nodes)
            assert viewer.viewport_y <= viewer.cursor < viewer.viewport_y + viewer.viewport_height
            for node in viewer.visible_nodes:
                assert all(ancestor.expanded for ancestor in node.ancestors())


def test_pluralize():
    assert pluralize("item", 1) == "item"
    assert pluralize("item", 0) == "items"
    assert pluralize("item", 3) == "items"
