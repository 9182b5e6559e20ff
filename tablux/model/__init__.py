"""Document models: the JSON tree and the CSV table."""

from tablux.model.table import NO_SORT, TableData
from tablux.model.tree import MAX_TREE_DEPTH, NodeKind, TreeNode, format_number, kind_of

__all__ = [
    "MAX_TREE_DEPTH",
    "NO_SORT",
    "NodeKind",
    "TableData",
    "TreeNode",
    "format_number",
    "kind_of",
]
