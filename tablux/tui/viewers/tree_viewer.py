"""
Tree viewer for JSON documents.

Flattens the expanded part of a TreeNode tree into a list of visible
nodes, keeps a cursor and a scroll offset over that list, and renders
the rows inside the viewport with tree-drawing guides.

The viewer is plain Python state; hosts call the movement methods in
response to input and ``render()`` whenever they need a frame.
"""

from __future__ import annotations

import json

from rich.text import Text

from tablux.config import DEFAULT_TREE_HEIGHT
from tablux.model import NodeKind, TreeNode
from tablux.tui.theme import DEFAULT_THEME, Theme

EMPTY_PLACEHOLDER = "Empty JSON"


def pluralize(word: str, count: int) -> str:
    return word if count == 1 else f"{word}s"


class TreeViewer:
    """Navigable, partially collapsed view over a JSON tree.

    Attributes:
        root: Root of the tree being shown.
        cursor: Index of the selected row in `visible_nodes`.
        viewport_y: Index of the first rendered row.
        viewport_height: Number of rows rendered.
    """

    def __init__(
        self,
        root: TreeNode,
        viewport_height: int = DEFAULT_TREE_HEIGHT,
        theme: Theme = DEFAULT_THEME,
    ) -> None:
        self.root = root
        self.theme = theme
        self.cursor = 0
        self.viewport_y = 0
        self.viewport_height = max(1, viewport_height)
        self._nodes: list[TreeNode] = []
        self.visible_nodes: list[TreeNode] = []
        self._rebuild()

    # ------------------------------------------------------------------
    # Visible node list
    # ------------------------------------------------------------------

    def _rebuild(self) -> None:
        """Re-walk the tree and recompute the visible node list."""
        self._nodes = []
        self._flatten(self.root)
        self.visible_nodes = [
            node
            for node in self._nodes
            if all(ancestor.expanded for ancestor in node.ancestors())
        ]
        self._clamp_cursor()

    def _flatten(self, node: TreeNode) -> None:
        # Pre-order walk that includes collapsed nodes but not their subtrees
        stack = [node]
        while stack:
            current = stack.pop()
            self._nodes.append(current)
            if current.expanded:
                stack.extend(reversed(current.children))

    def _clamp_cursor(self) -> None:
        if not self.visible_nodes:
            self.cursor = 0
        elif self.cursor >= len(self.visible_nodes):
            self.cursor = len(self.visible_nodes) - 1
        elif self.cursor < 0:
            self.cursor = 0

    def _ensure_cursor_visible(self) -> None:
        """Scroll the minimal amount that keeps the cursor inside the viewport."""
        if self.cursor < self.viewport_y:
            self.viewport_y = self.cursor
        elif self.cursor >= self.viewport_y + self.viewport_height:
            self.viewport_y = self.cursor - self.viewport_height + 1

    @property
    def current_node(self) -> TreeNode | None:
        if not self.visible_nodes:
            return None
        return self.visible_nodes[self.cursor]

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1
        self._ensure_cursor_visible()

    def move_down(self) -> None:
        if self.cursor < len(self.visible_nodes) - 1:
            self.cursor += 1
        self._ensure_cursor_visible()

    def move_top(self) -> None:
        self.cursor = 0
        self._ensure_cursor_visible()

    def move_bottom(self) -> None:
        self.cursor = max(0, len(self.visible_nodes) - 1)
        self._ensure_cursor_visible()

    def toggle_current(self) -> None:
        """Expand or collapse the node under the cursor.

        Leaf nodes are left alone. The cursor keeps its numeric position.
        """
        node = self.current_node
        if node is None or not node.has_children:
            return
        node.toggle()
        self._rebuild()
        self._ensure_cursor_visible()

    def expand_all(self) -> None:
        self.root.set_expanded_recursive(True)
        self._rebuild()
        self._ensure_cursor_visible()

    def collapse_all(self) -> None:
        self.root.set_expanded_recursive(False)
        self._rebuild()
        self._ensure_cursor_visible()

    def set_viewport_height(self, height: int) -> None:
        self.viewport_height = max(1, height)
        self._ensure_cursor_visible()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render(self) -> Text:
        """Render the rows inside the viewport, one line per node."""
        if not self.visible_nodes:
            return Text(EMPTY_PLACEHOLDER)

        self._clamp_cursor()
        end = min(self.viewport_y + self.viewport_height, len(self.visible_nodes))
        lines = [
            self.render_node(self.visible_nodes[i], selected=i == self.cursor)
            for i in range(self.viewport_y, end)
        ]
        return Text("\n").join(lines)

    def render_node(self, node: TreeNode, selected: bool = False) -> Text:
        line = Text()
        line.append(self.indentation(node), style=self.theme.guide)
        line.append_text(self.format_node(node))
        if selected:
            line.stylize(self.theme.selected_node)
        return line

    def indentation(self, node: TreeNode) -> str:
        """Guide markers for a node followed by its expand/collapse glyph.

        One marker is emitted per ancestor below the root: a pipe when that
        ancestor has later siblings, blank padding when it is the last child.
        """
        glyphs = self.theme.glyphs
        markers = [
            glyphs.empty if ancestor.is_last_child else glyphs.pipe
            for ancestor in node.ancestors()
            if not ancestor.is_root
        ]
        markers.reverse()

        if node.has_children:
            markers.append(glyphs.expanded if node.expanded else glyphs.collapsed)
        else:
            markers.append(glyphs.leaf)
        return "".join(markers)

    def format_node(self, node: TreeNode) -> Text:
        """Key prefix plus a kind-specific rendering of the node."""
        theme = self.theme
        text = Text()
        if not node.is_root and node.key:
            text.append(f'"{node.key}"', style=theme.key)
            text.append(": ", style=theme.separator)

        if node.kind.is_container:
            opening, closing = ("{", "}") if node.kind is NodeKind.OBJECT else ("[", "]")
            if not node.children:
                text.append(opening + closing, style=theme.bracket)
            elif node.expanded:
                text.append(opening, style=theme.bracket)
            else:
                count = len(node.children)
                text.append(
                    f"{opening} {count} {pluralize('item', count)} {closing}",
                    style=theme.bracket,
                )
        elif node.kind is NodeKind.STRING:
            text.append(json.dumps(node.value, ensure_ascii=False), style=theme.string)
        elif node.kind is NodeKind.NUMBER:
            text.append(node.display_value(), style=theme.number)
        elif node.kind is NodeKind.BOOLEAN:
            text.append(node.display_value(), style=theme.boolean)
        else:
            text.append("null", style=theme.null)
        return text
