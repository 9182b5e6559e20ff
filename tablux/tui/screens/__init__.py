"""Screens for the TUI application."""

from tablux.tui.screens.progress import LoadingScreen

__all__ = [
    "LoadingScreen",
]
