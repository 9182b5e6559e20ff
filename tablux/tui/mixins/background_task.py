"""
Background Task Mixin for parsing input off the event loop.

Provides a reusable pattern for:
- Pushing a loading screen
- Reading and parsing the input in a worker thread
- Reporting progress from the worker
- Delivering exactly one completion or failure callback
- Dismissing the loading screen
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable

from textual import work

from tablux.errors import TabluxError

if TYPE_CHECKING:
    from tablux.tui.screens.progress import LoadingScreen

logger = logging.getLogger(__name__)


class BackgroundTaskMixin:
    """Mixin providing a one-shot background load with a loading screen.

    Usage:
        class MyApp(BackgroundTaskMixin, App):
            def on_mount(self):
                self._run_loading_task(
                    filename="data.json",
                    read_fn=lambda: read_source("data.json"),
                    parse_fn=parse_data,
                    on_complete=self._on_loaded,
                    on_error=self._on_load_failed,
                )
    """

    def _run_loading_task(
        self,
        filename: str,
        read_fn: Callable[[], bytes],
        parse_fn: Callable[[bytes], Any],
        on_complete: Callable[[Any], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        """Run a loading task behind a loading screen.

        Args:
            filename: Name of the input being loaded (for display).
            read_fn: Returns the raw input bytes.
            parse_fn: Turns the bytes into a document.
            on_complete: Called on the UI thread with the document.
            on_error: Called on the UI thread with the failure.
        """
        from tablux.tui.screens.progress import LoadingScreen

        screen = LoadingScreen(filename=filename)
        self.app.push_screen(screen)
        self._run_loading_worker(screen, read_fn, parse_fn, on_complete, on_error)

    @work(thread=True, exclusive=True)
    def _run_loading_worker(
        self,
        screen: "LoadingScreen",
        read_fn: Callable[[], bytes],
        parse_fn: Callable[[bytes], Any],
        on_complete: Callable[[Any], None],
        on_error: Callable[[Exception], None],
    ) -> None:
        """Background worker for the loading task."""
        try:
            data = read_fn()
            self.app.call_from_thread(screen.update_size, len(data))
            result = parse_fn(data)
        except TabluxError as e:
            logger.info("Load failed: %s", e)
            self.app.call_from_thread(self.app.pop_screen)
            self.app.call_from_thread(on_error, e)
            return
        except Exception as e:
            logger.exception("Unexpected error while loading %s", screen.filename)
            self.app.call_from_thread(self.app.pop_screen)
            self.app.call_from_thread(on_error, e)
            return

        self.app.call_from_thread(self.app.pop_screen)
        self.app.call_from_thread(on_complete, result)
