"""Viewers: navigable, renderable state over the document models."""

from tablux.tui.viewers.table_viewer import TableViewer, compute_column_widths, truncate
from tablux.tui.viewers.tree_viewer import TreeViewer

__all__ = [
    "TableViewer",
    "TreeViewer",
    "compute_column_widths",
    "truncate",
]
