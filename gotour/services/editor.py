"""
EditorContext - Display preferences and error annotations for the code editor.

Provides:
- "imports" and "syntax" toggles persisted in the KeyValueStore
- paint(): apply the syntax mode once the editor surface exists
- highlight()/on_change(): per-line error marks driven by the Runner

The editor widget itself lives outside this package; it is reached through
the EditorSurface protocol.
"""

import logging
import threading
from typing import Callable, Optional, Protocol

from .storage import KeyValueStore


logger = logging.getLogger(__name__)

MODE_SYNTAX = "text/x-go"
MODE_PLAIN = "text/x-go-comment"
PAINT_INTERVAL = 0.01  # seconds between checks for the editor surface


class EditorSurface(Protocol):
    """The live editor widget."""

    def get_mode(self) -> str: ...

    def set_mode(self, mode: str) -> None: ...

    def refresh(self) -> None: ...

    def mark_line(self, line: int, message: str) -> None: ...

    def clear_marks(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay: float, callback: Callable[[], None]) -> None: ...


class TimerScheduler:
    """Run callbacks on daemon threading.Timer threads."""

    def call_later(self, delay: float, callback: Callable[[], None]):
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()


SurfaceProvider = Callable[[], Optional[EditorSurface]]


class EditorContext:
    """
    Editor state kept for a whole page session.

    Wire on_change() as the widget's change callback so stale error marks
    disappear as soon as the student edits the code.
    """

    def __init__(
        self,
        store: KeyValueStore,
        surface_provider: SurfaceProvider,
        scheduler: Optional[Scheduler] = None,
        max_paint_attempts: Optional[int] = None,
    ):
        """
        Initialize editor context.

        Args:
            store: KeyValueStore holding the "imports" and "syntax" flags
            surface_provider: Returns the editor surface, or None until it exists
            scheduler: Schedules paint re-checks (default: TimerScheduler)
            max_paint_attempts: Stop re-checking after this many tries
                (default: keep checking until the surface appears)
        """
        self.store = store
        self.surface_provider = surface_provider
        self.scheduler = scheduler or TimerScheduler()
        self.max_paint_attempts = max_paint_attempts

        self.imports = store.get("imports") == "true"
        self.syntax = store.get("syntax") == "true"
        self.annotations: dict[int, str] = {}
        self._paint_generation = 0

    # -------------------------------------------------------------------------
    # Preferences
    # -------------------------------------------------------------------------

    def toggle_imports(self):
        self.imports = not self.imports
        self.store.set("imports", self.imports)

    def toggle_syntax(self):
        self.syntax = not self.syntax
        self.store.set("syntax", self.syntax)
        self.paint()

    @property
    def mode(self) -> str:
        return MODE_SYNTAX if self.syntax else MODE_PLAIN

    def paint(self):
        """
        Apply the current mode to the editor.

        The widget starts asynchronously, so this keeps re-checking until the
        surface reports the wanted mode, then refreshes it. A later call
        supersedes any re-checks still pending from an earlier one.
        """
        self._paint_generation += 1
        generation = self._paint_generation
        attempts = 0

        def check():
            nonlocal attempts
            if generation != self._paint_generation:
                return  # superseded by a later paint()
            attempts += 1
            mode = self.mode
            surface = self.surface_provider()
            if surface is not None:
                if surface.get_mode() == mode:
                    surface.refresh()
                    return
                surface.set_mode(mode)
            if self.max_paint_attempts is not None and attempts >= self.max_paint_attempts:
                logger.debug(f"Gave up painting mode {mode} after {attempts} attempts")
                return
            self.scheduler.call_later(PAINT_INTERVAL, check)

        check()

    # -------------------------------------------------------------------------
    # Error annotations
    # -------------------------------------------------------------------------

    def highlight(self, line, message: str):
        """Mark a 1-based line as errored with message as its tooltip."""
        line_no = int(line)
        self.annotations[line_no] = message
        surface = self.surface_provider()
        if surface is not None:
            surface.mark_line(line_no, message)

    def on_change(self):
        """Clear every error mark and tooltip."""
        self.annotations.clear()
        surface = self.surface_provider()
        if surface is not None:
            surface.clear_marks()
