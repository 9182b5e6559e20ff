"""Widgets for the Tablux TUI."""

from tablux.tui.widgets.viewer_panel import ViewerPanel

__all__ = [
    "ViewerPanel",
]
