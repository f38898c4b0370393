"""
Console output for treefind.

The reporter is shared by the spinner thread, the traversal thread and the
coordinator, so every write goes through one lock. Lines that follow an
in-place spinner frame first rewind the cursor with a carriage return, and
on a terminal also erase the frame.
"""

import threading
from typing import Optional, Sequence

from rich.console import Console
from rich.control import Control, ControlType

from .models.search_results import EntryKind


INFO_STYLE = "cyan"
SUCCESS_STYLE = "green"
SPINNER_STYLE = "yellow"
MISSING_STYLE = "red"
HEADING_STYLE = "bold white"


class ConsoleReporter:
    """Thread-safe line printer built on a Rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(highlight=False, soft_wrap=True)
        self._lock = threading.RLock()
        self._inline_pending = False

    def info(self, line: str) -> None:
        self._print_line(line, INFO_STYLE)

    def success(self, line: str) -> None:
        self._print_line(line, SUCCESS_STYLE)

    def missing(self, line: str) -> None:
        self._print_line(line, MISSING_STYLE)

    def found(self, kind: EntryKind, path: str) -> None:
        """Announce a match as soon as the traversal reports it."""
        self.success(f"{kind.value} was found: {path}")

    def print_no_newline(self, line: str, style: Optional[str] = SPINNER_STYLE) -> None:
        """
        Overwrite the current line with `line` and leave the cursor on it.

        Used for spinner frames; the output is flushed immediately.
        """
        with self._lock:
            self._rewind()
            self.console.print(line, style=style, end="", markup=False, highlight=False)
            self._inline_pending = True
            self.console.file.flush()

    def print_results(self, items: Sequence[str], heading: str, empty_message: str) -> None:
        """
        Print a numbered list under a heading, or a fallback line when empty.

        Args:
            items: Entries to list, numbered from 1 in the given order
            heading: Printed above the list when there is at least one item
            empty_message: Printed alone when there are no items
        """
        with self._lock:
            if not items:
                self.missing(empty_message)
                return

            self._print_line(heading, HEADING_STYLE)
            for number, item in enumerate(items, start=1):
                self._print_line(f"{number}. {item}", None)

    def _print_line(self, line: str, style: Optional[str]) -> None:
        with self._lock:
            self._rewind()
            self.console.print(line, style=style, markup=False, highlight=False)
            self.console.file.flush()

    def _rewind(self) -> None:
        """Move back over a pending spinner frame, if any."""
        if not self._inline_pending:
            return
        if self.console.is_terminal:
            self.console.control(Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 2)))
        else:
            # Rich drops control segments off-terminal and strips "\r" from text
            self.console.file.write("\r")
        self._inline_pending = False
