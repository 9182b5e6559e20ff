"""
Viewer panel widget.

Hosts the controller inside Textual: key presses and resizes become
controller events, and the frame the controller returns is what the
widget renders.
"""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from tablux.tui.controller import AppState, Event, KeyEvent, ResizeEvent, update, view


class ViewerPanel(Widget, can_focus=True):
    """Widget that renders the active tree or table viewer.

    Attributes:
        state: Current controller state.
    """

    DEFAULT_CSS = """
    ViewerPanel {
        height: 1fr;
        background: $surface;
        border: solid $primary;
        padding: 0 1;
    }
    """

    class StateChanged(Message):
        """Posted after every event the panel dispatches.

        Attributes:
            state: The controller state after the event.
        """

        def __init__(self, state: AppState) -> None:
            self.state = state
            super().__init__()

    def __init__(
        self,
        state: AppState,
        *,
        id: str | None = None,
        classes: str | None = None,
    ) -> None:
        """Initialize the panel.

        Args:
            state: Initial controller state (normally still loading).
            id: The widget ID.
            classes: CSS classes for the widget.
        """
        super().__init__(id=id, classes=classes)
        self.state = state
        self._frame: Text = view(state)

    def dispatch(self, event: Event) -> None:
        """Run one event through the controller and redraw."""
        self.state, self._frame = update(self.state, event)
        self.refresh()
        self.post_message(self.StateChanged(self.state))
        if self.state.should_quit:
            self.app.exit()

    def render(self) -> Text:
        return self._frame

    def on_key(self, event: events.Key) -> None:
        event.stop()
        self.dispatch(KeyEvent(event.key))

    def on_resize(self, event: events.Resize) -> None:
        # Margins are worked out from the terminal size, not the panel size
        size = self.app.size
        self.dispatch(ResizeEvent(size.width, size.height))
