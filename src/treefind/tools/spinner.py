"""
Progress spinner for treefind.

The spinner redraws "<label> <glyph>" in place until its stop event is set.
The event is checked before each pass over the glyph sequence and waited on
between glyphs, so the spinner goes quiet at most one cycle after stop().
"""

import threading
from typing import Optional
import logging

from ..console import ConsoleReporter
from ..models.config import SpinnerConfig
from .worker import BackgroundWorker


logger = logging.getLogger(__name__)


class SpinnerWorker(BackgroundWorker):
    """Renders a rotating glyph until told to stop."""

    def __init__(self, reporter: ConsoleReporter, config: Optional[SpinnerConfig] = None,
                 stop_event: Optional[threading.Event] = None):
        super().__init__(name="spinner")
        self.reporter = reporter
        self.config = config or SpinnerConfig()
        self.stop_event = stop_event or threading.Event()
        self.frames_rendered = 0

    def work(self) -> None:
        interval = self.config.interval_seconds
        while not self.stop_event.is_set():
            for glyph in self.config.glyphs:
                self.reporter.print_no_newline(f"{self.config.label} {glyph}")
                self.frames_rendered += 1
                if self.stop_event.wait(interval):
                    break
        logger.debug(f"Spinner stopped after {self.frames_rendered} frames")

    def stop(self) -> None:
        """Signal the spinner to stop. Idempotent; the signal is never withdrawn."""
        self.stop_event.set()
