"""
Tree model for JSON documents.

A TreeNode is built once from the Python values produced by ``json.loads``
and never changes shape afterwards. The only mutable piece of state is the
``expanded`` flag of object and array nodes, which the tree viewer toggles.

Children are owned by their parent; the parent link is a weak reference so
the tree holds no reference cycles.
"""

from __future__ import annotations

import math
import weakref
from enum import Enum
from typing import Any, Iterator


# Maximum nesting depth accepted when building a tree
MAX_TREE_DEPTH = 500


class NodeKind(Enum):
    """JSON value kinds."""

    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"

    @property
    def is_container(self) -> bool:
        return self in (NodeKind.OBJECT, NodeKind.ARRAY)


def kind_of(value: Any) -> NodeKind:
    """Map a decoded JSON value to its NodeKind.

    Raises:
        TypeError: If the value is not something ``json.loads`` produces.
    """
    if isinstance(value, dict):
        return NodeKind.OBJECT
    if isinstance(value, list):
        return NodeKind.ARRAY
    if isinstance(value, str):
        return NodeKind.STRING
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return NodeKind.BOOLEAN
    if isinstance(value, (int, float)):
        return NodeKind.NUMBER
    if value is None:
        return NodeKind.NULL
    raise TypeError(f"Unsupported JSON value type: {type(value).__name__}")


def format_number(value: int | float) -> str:
    """Format a JSON number the way it is shown in the tree.

    Integral floats drop their fractional part (``2.0`` -> ``2``). The
    non-finite values that json.loads accepts keep their JSON spelling.
    """
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    if isinstance(value, float) and math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return str(value)


class TreeNode:
    """A single JSON value in the document tree.

    Attributes:
        key: Member name for object members, "" for array elements.
        kind: The NodeKind of the value.
        value: Scalar payload; None for objects and arrays.
        children: Child nodes in document order.
        expanded: Expand/collapse flag, only meaningful for containers.
        path: Dotted path from the root, e.g. ``users[0].name``.
        index: Position in the parent's children (0 for the root).
    """

    __slots__ = (
        "key",
        "kind",
        "value",
        "children",
        "expanded",
        "path",
        "index",
        "_parent_ref",
        "__weakref__",
    )

    def __init__(
        self,
        key: str,
        kind: NodeKind,
        value: Any = None,
        parent: TreeNode | None = None,
        index: int = 0,
    ) -> None:
        self.key = key
        self.kind = kind
        self.value = None if kind.is_container else value
        self.children: list[TreeNode] = []
        self.expanded = True
        self.index = index
        self._parent_ref = weakref.ref(parent) if parent is not None else None
        self.path = self._compute_path(parent)

    def _compute_path(self, parent: TreeNode | None) -> str:
        if parent is None:
            return ""
        if parent.kind is NodeKind.ARRAY:
            return f"{parent.path}[{self.index}]"
        if not parent.path:
            return self.key
        return f"{parent.path}.{self.key}"

    @classmethod
    def from_value(
        cls,
        key: str,
        value: Any,
        parent: TreeNode | None = None,
        index: int = 0,
        depth: int = 0,
    ) -> TreeNode:
        """Recursively build a node (and its subtree) from a decoded JSON value.

        Args:
            key: Key for this node.
            value: The decoded JSON value.
            parent: Parent node, None for the root.
            index: Position of this node among its parent's children.
            depth: Current nesting depth.

        Raises:
            ValueError: If nesting exceeds MAX_TREE_DEPTH.
        """
        if depth > MAX_TREE_DEPTH:
            raise ValueError(f"document nesting exceeds {MAX_TREE_DEPTH} levels")

        kind = kind_of(value)
        node = cls(key, kind, value, parent, index)

        if kind is NodeKind.OBJECT:
            for i, (child_key, child_value) in enumerate(value.items()):
                node.children.append(
                    cls.from_value(str(child_key), child_value, node, i, depth + 1)
                )
        elif kind is NodeKind.ARRAY:
            for i, item in enumerate(value):
                node.children.append(cls.from_value("", item, node, i, depth + 1))

        return node

    @property
    def parent(self) -> TreeNode | None:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def is_root(self) -> bool:
        return self._parent_ref is None

    @property
    def has_children(self) -> bool:
        return bool(self.children)

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def is_last_child(self) -> bool:
        """Whether this node is the last child of its parent (True for the root)."""
        parent = self.parent
        if parent is None:
            return True
        return self.index == len(parent.children) - 1

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.ancestors())

    @property
    def type_name(self) -> str:
        return self.kind.value

    def ancestors(self) -> Iterator[TreeNode]:
        """Yield the parent chain, nearest ancestor first."""
        current = self.parent
        while current is not None:
            yield current
            current = current.parent

    def toggle(self) -> None:
        """Flip the expanded flag of a container node. Scalars are left alone."""
        if self.kind.is_container:
            self.expanded = not self.expanded

    def set_expanded_recursive(self, expanded: bool) -> None:
        """Set `expanded` on this node and every descendant that has children."""
        stack = [self]
        while stack:
            node = stack.pop()
            if node.has_children:
                node.expanded = expanded
                stack.extend(node.children)

    def display_value(self) -> str:
        """Textual form of the node's payload."""
        if self.kind is NodeKind.OBJECT:
            return "{...}" if self.children else "{}"
        if self.kind is NodeKind.ARRAY:
            return "[...]" if self.children else "[]"
        if self.kind is NodeKind.STRING:
            return self.value
        if self.kind is NodeKind.NUMBER:
            return format_number(self.value)
        if self.kind is NodeKind.BOOLEAN:
            return "true" if self.value else "false"
        return "null"

    def walk(self) -> Iterator[TreeNode]:
        """Yield every node of the subtree in pre-order."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children))

    def __repr__(self) -> str:
        return f"TreeNode(path={self.path!r}, kind={self.kind.value}, children={len(self.children)})"
