"""
Main Textual application for Tablux.

This is the entry point for the terminal viewer: it parses the command
line, loads the input and shows it as a collapsible tree (JSON, JSONL) or
a sortable table (CSV).

Usage:
    python -m tablux data.json
    cat data.csv | python -m tablux
    python -m tablux data.txt --format jsonl --no-interactive
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from rich.console import Console
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.logging import TextualHandler
from textual.widgets import Header, Static

from tablux import __version__
from tablux.config import (
    DEFAULT_COLUMN_MAX_WIDTH,
    FORMAT_CHOICES,
    Settings,
)
from tablux.data_formats import STDIN_SOURCE, Document, load_document, parse_data, read_source
from tablux.data_formats.loader import is_stdin
from tablux.errors import ReadError, TabluxError
from tablux.tui.controller import (
    AppState,
    DataLoaded,
    ResizeEvent,
    controls_help,
    title,
    update,
)
from tablux.tui.mixins import BackgroundTaskMixin
from tablux.tui.widgets import ViewerPanel

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class TabluxApp(BackgroundTaskMixin, App):
    """A Textual app for browsing JSON trees and CSV tables."""

    TITLE = "Tablux"

    CSS = """
    Screen {
        background: $surface;
    }

    Header {
        dock: top;
        background: $primary;
        color: $text;
    }

    #controls {
        dock: bottom;
        height: 1;
        padding: 0 1;
        background: $primary-darken-2;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(
        self,
        source: str,
        settings: Settings | None = None,
        data: bytes | None = None,
    ) -> None:
        """Initialize the app with an input source.

        Args:
            source: File path or STDIN_SOURCE.
            settings: Runtime settings.
            data: Input bytes already read (required for stdin).
        """
        super().__init__()
        self._source = source
        self._settings = settings or Settings()
        self._data = data
        self._initial_state = AppState(source=source, settings=self._settings)

    def compose(self) -> ComposeResult:
        # The loading screen may be on top when these are updated
        self.panel = ViewerPanel(self._initial_state, id="viewer")
        self.controls = Static(controls_help(self._initial_state), id="controls")
        yield Header()
        yield self.panel
        yield self.controls

    def on_mount(self) -> None:
        """Start loading the input behind the loading screen."""
        self.title = title(self._initial_state)
        self.panel.focus()

        data = self._data
        forced_format = self._settings.forced_format
        extension = None if is_stdin(self._source) else os.path.splitext(self._source)[1]

        self._run_loading_task(
            filename=os.path.basename(self._source),
            read_fn=lambda: data if data is not None else read_source(self._source),
            parse_fn=lambda raw: parse_data(raw, forced_format, extension),
            on_complete=self._on_document_loaded,
            on_error=self._on_loading_error,
        )

    def _on_document_loaded(self, document: Document) -> None:
        """Called when the background parse completes successfully."""
        panel = self.panel
        if panel.state.width <= 0:
            panel.dispatch(ResizeEvent(self.size.width, self.size.height))
        panel.dispatch(DataLoaded(document=document))
        panel.focus()

    def _on_loading_error(self, error: Exception) -> None:
        """Called when reading or parsing fails."""
        self.panel.dispatch(DataLoaded(error=error))

    def on_viewer_panel_state_changed(self, message: ViewerPanel.StateChanged) -> None:
        """Keep the title and the controls line in step with the controller."""
        self.title = title(message.state)
        self.controls.update(controls_help(message.state))


def render_document(document: Document, settings: Settings, source: str = STDIN_SOURCE) -> Text:
    """Render a document once at the default terminal size."""
    state = AppState(source=source, settings=settings)
    state, _ = update(state, ResizeEvent(settings.default_width, settings.default_height))
    state, frame = update(state, DataLoaded(document=document))
    return frame


def configure_logging(settings: Settings, interactive: bool) -> None:
    """Send log records to a file, the Textual devtools console or stderr."""
    if settings.log_file:
        handler: logging.Handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    elif interactive:
        # Writing to stderr would corrupt the screen
        handler = TextualHandler()
    else:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT, handlers=[handler], force=True)


def _reattach_terminal() -> None:
    """Point stdin back at the controlling terminal after reading piped input."""
    try:
        fd = os.open("/dev/tty", os.O_RDONLY)
    except OSError as e:
        raise ReadError("/dev/tty", "no terminal for interactive mode, use --no-interactive") from e
    os.dup2(fd, sys.stdin.fileno())
    os.close(fd)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tablux",
        description="View JSON, JSONL and CSV data in a terminal UI. "
        "Reads standard input when no path is given.",
        epilog="Keys: arrows or h/j/k/l navigate, Space/Enter toggles a node "
        "(JSON) or column visibility (CSV), s sorts (CSV), q quits.",
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Path to a JSON, JSONL or CSV file ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "--format",
        choices=FORMAT_CHOICES,
        default=None,
        help="Force the input format instead of detecting it",
    )
    parser.add_argument(
        "--no-interactive",
        action="store_true",
        help="Render once to standard output and exit",
    )
    parser.add_argument(
        "--column-max-width",
        type=int,
        default=DEFAULT_COLUMN_MAX_WIDTH,
        help=f"Maximum width of a CSV column (default: {DEFAULT_COLUMN_MAX_WIDTH})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Write log records to this file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse arguments and run the viewer."""
    args = build_parser().parse_args(argv)
    settings = Settings.from_args(args)
    interactive = not args.no_interactive
    configure_logging(settings, interactive)

    source = STDIN_SOURCE if is_stdin(args.path) else args.path

    if source == STDIN_SOURCE:
        if sys.stdin is None or sys.stdin.isatty():
            print("No input provided. Pass a file path or pipe data to stdin.", file=sys.stderr)
            print("Run with --help for usage information.", file=sys.stderr)
            sys.exit(1)
    else:
        if not os.path.exists(source):
            print(f"Error: Path not found: {source}", file=sys.stderr)
            sys.exit(1)
        if not os.access(source, os.R_OK):
            print(f"Error: Permission denied: {source}", file=sys.stderr)
            sys.exit(1)

    if not interactive:
        try:
            document = load_document(source, settings.forced_format)
        except TabluxError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        Console(soft_wrap=True).print(render_document(document, settings, source))
        return

    data = None
    if source == STDIN_SOURCE:
        try:
            data = read_source(source)
            _reattach_terminal()
        except ReadError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    logger.debug("Starting interactive session for %s", source)
    TabluxApp(source=source, settings=settings, data=data).run()


if __name__ == "__main__":
    main()
