"""Mixins for the TUI application."""

from tablux.tui.mixins.background_task import BackgroundTaskMixin

__all__ = [
    "BackgroundTaskMixin",
]
