"""
Loading screen shown while the input is read and parsed.

Only quit is accepted while it is up; the background worker pops it once
the document (or the error) is ready.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Middle
from textual.css.query import NoMatches
from textual.screen import Screen
from textual.widgets import Header, Static


class LoadingScreen(Screen):
    """Centered box with the input name, a status line and a detail line.

    Usage:
        screen = LoadingScreen("data.csv")
        app.push_screen(screen)
        screen.update_size(1024)    # "Parsing...", "1,024 bytes"
    """

    DEFAULT_CSS = """
    LoadingScreen {
        align: center middle;
    }

    #loading-box {
        width: auto;
        height: auto;
        padding: 1 4;
        border: solid $primary;
    }

    #loading-title {
        text-style: bold;
        content-align: center middle;
    }

    #loading-status, #loading-detail {
        color: $text-muted;
        content-align: center middle;
    }
    """

    BINDINGS = [
        Binding("q", "app.quit", "Quit", show=True),
        Binding("ctrl+c", "app.quit", "Quit", show=False),
    ]

    def __init__(self, filename: str = "", name: str | None = None) -> None:
        """Initialize the loading screen.

        Args:
            filename: Name of the input being loaded (for display).
            name: Optional screen name.
        """
        super().__init__(name=name)
        self.filename = filename
        self.heading = f"Loading {filename}..." if filename else "Loading..."
        self.status = "Reading input..."
        self.detail = ""

    def compose(self) -> ComposeResult:
        yield Header()
        with Center():
            with Middle(id="loading-box"):
                yield Static(self.heading, id="loading-title")
                yield Static(self.status, id="loading-status")
                yield Static(self.detail, id="loading-detail")

    def _set_line(self, widget_id: str, text: str) -> None:
        # The worker can report before compose has run
        try:
            self.query_one(f"#{widget_id}", Static).update(text)
        except NoMatches:
            pass

    def update_status(self, status: str) -> None:
        self.status = status
        self._set_line("loading-status", status)

    def update_detail(self, detail: str) -> None:
        self.detail = detail
        self._set_line("loading-detail", detail)

    def update_size(self, size: int) -> None:
        """Show how much input is being parsed.

        Args:
            size: Input size in bytes.
        """
        self.update_status("Parsing...")
        self.update_detail(f"{size:,} bytes")
