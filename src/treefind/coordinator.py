"""
Search coordinator for treefind.

The coordinator runs one search: it starts the spinner and the traversal on
separate threads, joins the traversal, signals the spinner to stop, joins it,
and only then collects the matches and prints the report. Both joins come
before any report output, so spinner frames never mix with the report and
the report always sees the complete result set.
"""

import queue
import threading
import time
from typing import Optional
import logging

from .console import ConsoleReporter
from .models.config import FinderSettings
from .models.search_request import SearchRequest
from .models.search_results import EntryMatch, ResultStore, SearchReport
from .tools.fs_walker import FSWalker, TraversalWorker
from .tools.spinner import SpinnerWorker


logger = logging.getLogger(__name__)


class SearchCoordinator:
    """
    Owns the state of a single search run.

    The request, the result store and the completion event are created here
    and discarded with the coordinator. `run()` may be called once.
    """

    def __init__(self, request: SearchRequest, settings: Optional[FinderSettings] = None,
                 reporter: Optional[ConsoleReporter] = None):
        self.request = request
        self.settings = settings or FinderSettings()
        self.reporter = reporter or ConsoleReporter()
        self.results = ResultStore()
        self.completed = threading.Event()
        self._matches: "queue.Queue[EntryMatch]" = queue.Queue()
        self._walker = FSWalker(follow_links=self.settings.follow_links)

    def run(self) -> SearchReport:
        """
        Execute the search and print the report.

        Returns:
            SearchReport with the complete match lists

        Raises:
            WorkerFailedError: If either worker thread died; nothing is reported
        """
        if self.completed.is_set():
            raise RuntimeError("SearchCoordinator.run() can only be called once")

        self.reporter.info(f"Searching for {self.request.target} in {self.request.source}")
        logger.info(f"Starting search: {self.request}")

        spinner = SpinnerWorker(self.reporter, self.settings.spinner, stop_event=self.completed)
        traversal = TraversalWorker(self.request, self._matches,
                                    on_found=self._announce, walker=self._walker)

        started = time.monotonic()
        spinner.start()
        traversal.start()
        try:
            traversal.join_checked()
        finally:
            self.completed.set()
            spinner.join()
        spinner.join_checked()
        elapsed = time.monotonic() - started

        self._collect()
        report = SearchReport(
            request=self.request,
            directories=self.results.directories(),
            files=self.results.files(),
            stats=self._walker.get_stats(),
            elapsed_seconds=elapsed
        )
        logger.info(f"Search finished in {elapsed:.2f}s with {report.total_matches} matches")

        self.display_results(report)
        return report

    def display_results(self, report: SearchReport) -> None:
        """Print the numbered directory and file lists and the closing line."""
        target = self.request.target
        self.reporter.print_results(report.directories, "The target directories are:",
                                    f"the directory {target} was not found")
        self.reporter.print_results(report.files, "The target files are:",
                                    f"the file {target} was not found")
        self.reporter.info("Search completed")

    def _announce(self, match: EntryMatch) -> None:
        self.reporter.found(match.kind, match.path)

    def _collect(self) -> None:
        """Move every queued match into the result store, in discovery order."""
        while True:
            try:
                match = self._matches.get_nowait()
            except queue.Empty:
                break
            self.results.add(match)
