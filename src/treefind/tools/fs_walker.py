"""
Filesystem walker for treefind.

This module traverses a directory tree in a single pass and reports every
entry whose path contains the target substring. Directories match on their
full path alone; files must also carry the substring in their own name.
Unreadable entries are skipped and counted, never fatal.
"""

import os
import queue
from typing import Callable, Dict, Iterator, Optional
import logging

from ..models.search_request import SearchRequest
from ..models.search_results import EntryKind, EntryMatch
from .worker import BackgroundWorker


logger = logging.getLogger(__name__)


class FSWalker:
    """
    Filesystem walker that matches entries against a substring.

    Symlinked directories are classified as directories but only descended
    into when `follow_links` is set. Broken symlinks are skipped.
    """

    def __init__(self, follow_links: bool = False):
        """
        Initialize the filesystem walker.

        Args:
            follow_links: Descend into directories reached through symlinks
        """
        self.follow_links = follow_links
        self._stats = self._empty_stats()

    def walk(self, request: SearchRequest) -> Iterator[EntryMatch]:
        """
        Walk the tree under `request.source`, including the source itself.

        Args:
            request: Search parameters

        Yields:
            EntryMatch objects in discovery order
        """
        root = request.source
        if not os.path.lexists(root):
            logger.warning(f"Source path does not exist: {root}")
            self._stats['errors'] += 1
            return

        match = self._check_entry(root, os.path.basename(os.path.normpath(root)), request)
        if match:
            yield match

        if not os.path.isdir(root):
            return

        logger.info(f"Walking directory tree: {root}")
        for current_dir, subdirs, files in os.walk(root, onerror=self._on_walk_error,
                                                   followlinks=self.follow_links):
            self._stats['directories_traversed'] += 1
            for name in subdirs + files:
                match = self._check_entry(os.path.join(current_dir, name), name, request)
                if match:
                    yield match

    def _check_entry(self, path: str, name: str, request: SearchRequest) -> Optional[EntryMatch]:
        """
        Test a single entry against the request.

        Args:
            path: Full path of the entry
            name: Base name of the entry
            request: Search parameters

        Returns:
            EntryMatch for a matching entry, None otherwise
        """
        self._stats['entries_scanned'] += 1

        if request.target not in path:
            return None

        if not os.path.exists(path):
            logger.debug(f"Skipping unreadable entry: {path}")
            self._stats['errors'] += 1
            return None

        if os.path.isdir(path):
            self._stats['directories_matched'] += 1
            return EntryMatch(kind=EntryKind.DIRECTORY, path=path)

        if request.target in name and request.accepts_extension(name):
            self._stats['files_matched'] += 1
            return EntryMatch(kind=EntryKind.FILE, path=path)

        return None

    def _on_walk_error(self, error: OSError) -> None:
        logger.debug(f"Skipping unreadable directory {error.filename}: {error.strerror}")
        self._stats['errors'] += 1

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'entries_scanned': 0,
            'directories_traversed': 0,
            'directories_matched': 0,
            'files_matched': 0,
            'errors': 0
        }

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the walk.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()


class TraversalWorker(BackgroundWorker):
    """
    Runs an FSWalker on its own thread.

    Each match is put on `matches` for the coordinator and passed to
    `on_found` for immediate display. The worker never yields deliberately;
    it returns when the walk is exhausted.
    """

    def __init__(self, request: SearchRequest, matches: "queue.Queue[EntryMatch]",
                 on_found: Optional[Callable[[EntryMatch], None]] = None,
                 walker: Optional[FSWalker] = None):
        super().__init__(name="traversal")
        self.request = request
        self.matches = matches
        self.on_found = on_found
        self.walker = walker or FSWalker()

    def work(self) -> None:
        for match in self.walker.walk(self.request):
            self.matches.put(match)
            if self.on_found:
                self.on_found(match)
        logger.debug(f"Traversal finished: {self.walker.get_stats()}")
