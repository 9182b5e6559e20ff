"""
Application controller.

The controller is an explicit state machine: ``update(state, event)``
applies one input, resize or load-completion event and returns the new
state together with the frame to display. Any host loop can drive it;
the Textual app does, and so do the tests.

Events:
    - KeyEvent: a key press, using Textual key names ("up", "enter", "q", ...)
    - ResizeEvent: terminal size in cells
    - DataLoaded: the one-shot result of parsing the input
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field, replace
from enum import Enum

from rich.text import Text

from tablux.config import Settings
from tablux.data_formats import STDIN_SOURCE, Document
from tablux.tui.theme import DEFAULT_THEME, Theme
from tablux.tui.viewers import TableViewer, TreeViewer

logger = logging.getLogger(__name__)

QUIT_KEYS = frozenset(["q", "ctrl+c"])

TREE_KEYMAP: dict[str, str] = {
    "up": "move_up",
    "k": "move_up",
    "down": "move_down",
    "j": "move_down",
    "enter": "toggle_current",
    "space": "toggle_current",
    " ": "toggle_current",
    "e": "expand_all",
    "c": "collapse_all",
    "g": "move_top",
    "home": "move_top",
    "G": "move_bottom",
    "shift+g": "move_bottom",
    "end": "move_bottom",
}

TABLE_KEYMAP: dict[str, str] = {
    "up": "move_up",
    "k": "move_up",
    "down": "move_down",
    "j": "move_down",
    "left": "move_left",
    "h": "move_left",
    "right": "move_right",
    "l": "move_right",
    "enter": "toggle_column_visibility",
    "space": "toggle_column_visibility",
    " ": "toggle_column_visibility",
    "s": "sort_by_current_column",
}

TREE_HELP = "↑/↓: Navigate | Space/Enter: Toggle | e/c: Expand/Collapse all | q: Quit"
TABLE_HELP = "↑/↓/←/→: Navigate | Space/Enter: Toggle visibility | s: Sort | q: Quit"
DEFAULT_HELP = "q: Quit"


@dataclass(frozen=True)
class KeyEvent:
    key: str


@dataclass(frozen=True)
class ResizeEvent:
    width: int
    height: int


@dataclass(frozen=True)
class DataLoaded:
    """Result of the load attempt: exactly one of `document` or `error`."""

    document: Document | None = None
    error: Exception | None = None


Event = KeyEvent | ResizeEvent | DataLoaded


class ViewerKind(Enum):
    NONE = "none"
    TREE = "tree"
    TABLE = "table"


@dataclass
class AppState:
    """Everything the controller knows about the session.

    Viewers are mutable objects owned by the state; the remaining fields
    are replaced on every transition.
    """

    source: str = STDIN_SOURCE
    settings: Settings = field(default_factory=Settings)
    theme: Theme = DEFAULT_THEME
    width: int = 0
    height: int = 0
    format_name: str = ""
    tree_viewer: TreeViewer | None = None
    table_viewer: TableViewer | None = None
    loading: bool = True
    error_message: str = ""
    should_quit: bool = False

    @property
    def viewer_kind(self) -> ViewerKind:
        if self.tree_viewer is not None:
            return ViewerKind.TREE
        if self.table_viewer is not None:
            return ViewerKind.TABLE
        return ViewerKind.NONE

    @property
    def accepts_input(self) -> bool:
        """False while loading or after a failed load (only quit works then)."""
        return not self.loading and not self.error_message


def update(state: AppState, event: Event) -> tuple[AppState, Text]:
    """Apply one event and return the new state and the frame to show."""
    if isinstance(event, KeyEvent):
        state = _handle_key(state, event.key)
    elif isinstance(event, ResizeEvent):
        state = _handle_resize(state, event.width, event.height)
    elif isinstance(event, DataLoaded):
        state = _handle_loaded(state, event)
    else:
        raise TypeError(f"Unknown event: {event!r}")
    return state, view(state)


def _handle_key(state: AppState, key: str) -> AppState:
    if key in QUIT_KEYS:
        return replace(state, should_quit=True)
    if not state.accepts_input:
        return state

    if state.tree_viewer is not None:
        action = TREE_KEYMAP.get(key)
        if action:
            getattr(state.tree_viewer, action)()
    elif state.table_viewer is not None:
        action = TABLE_KEYMAP.get(key)
        if action:
            getattr(state.table_viewer, action)()
    return state


def _apply_size(state: AppState) -> None:
    if state.width <= 0 or state.height <= 0:
        return
    settings = state.settings
    if state.tree_viewer is not None:
        state.tree_viewer.set_viewport_height(settings.tree_viewport_height(state.height))
    if state.table_viewer is not None:
        state.table_viewer.set_viewport(*settings.table_viewport(state.width, state.height))


def _handle_resize(state: AppState, width: int, height: int) -> AppState:
    state = replace(state, width=width, height=height)
    _apply_size(state)
    return state


def _handle_loaded(state: AppState, event: DataLoaded) -> AppState:
    if event.error is not None or event.document is None:
        message = str(event.error) if event.error is not None else "no data loaded"
        logger.warning("Load of %s failed: %s", state.source, message)
        return replace(state, loading=False, error_message=f"Error: {message}")

    document = event.document
    tree_viewer = None
    table_viewer = None
    if document.tree is not None:
        tree_viewer = TreeViewer(document.tree, theme=state.theme)
    elif document.table is not None:
        table_viewer = TableViewer(
            document.table,
            column_max_width=state.settings.column_max_width,
            theme=state.theme,
        )

    state = replace(
        state,
        loading=False,
        error_message="",
        format_name=document.format_name,
        tree_viewer=tree_viewer,
        table_viewer=table_viewer,
    )
    _apply_size(state)
    return state


def view(state: AppState) -> Text:
    """Render the content area for the current state."""
    if state.error_message:
        return Text(state.error_message, style=state.theme.error)
    if state.loading:
        return Text(f"Loading {state.source}...")
    if state.tree_viewer is not None:
        return state.tree_viewer.render()
    if state.table_viewer is not None:
        return state.table_viewer.render()
    return Text("No content to display")


def controls_help(state: AppState) -> Text:
    """Key help line for the active viewer."""
    kind = state.viewer_kind if state.accepts_input else ViewerKind.NONE
    if kind is ViewerKind.TREE:
        help_text = TREE_HELP
    elif kind is ViewerKind.TABLE:
        help_text = TABLE_HELP
    else:
        help_text = DEFAULT_HELP
    return Text(help_text, style=state.theme.info)


def title(state: AppState) -> str:
    name = state.source if state.source == STDIN_SOURCE else os.path.basename(state.source)
    if state.format_name:
        return f"Tablux - {name} ({state.format_name})"
    return f"Tablux - {name}"
