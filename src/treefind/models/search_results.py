"""
Search results data models for treefind.

This module defines the match messages produced by the traversal worker,
the store the coordinator collects them into, and the final report snapshot.
"""

import threading
from typing import Dict, List, Any
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field

from .search_request import SearchRequest


class EntryKind(Enum):
    """Kind of filesystem entry a match refers to."""
    DIRECTORY = "directory"
    FILE = "file"


class EntryMatch(BaseModel):
    """
    A single matched entry, sent from the traversal worker to the coordinator.

    Attributes:
        kind: Whether the entry is a directory or a file
        path: Full path of the entry as produced by the traversal
    """

    model_config = ConfigDict(frozen=True)

    kind: EntryKind = Field(..., description="Kind of the matched entry")
    path: str = Field(..., min_length=1, description="Full path of the matched entry")

    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


class ResultStore:
    """
    Append-only accumulator for matched directories and files.

    Insertion order is discovery order. Access is serialized by a lock so the
    store can be filled from a thread other than the one that created it.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._directories: List[str] = []
        self._files: List[str] = []

    def add(self, match: EntryMatch) -> None:
        """Record a match in the sequence for its kind."""
        with self._lock:
            if match.is_directory():
                self._directories.append(match.path)
            else:
                self._files.append(match.path)

    def directories(self) -> List[str]:
        """Return a copy of the matched directory paths."""
        with self._lock:
            return list(self._directories)

    def files(self) -> List[str]:
        """Return a copy of the matched file paths."""
        with self._lock:
            return list(self._files)

    @property
    def total(self) -> int:
        with self._lock:
            return len(self._directories) + len(self._files)

    def __len__(self) -> int:
        return self.total


class SearchReport(BaseModel):
    """
    Snapshot of a completed search.

    Attributes:
        request: The request the search ran with
        directories: Matched directory paths in discovery order
        files: Matched file paths in discovery order
        stats: Traversal statistics counters
        elapsed_seconds: Wall time spent between starting and joining the workers
    """

    model_config = ConfigDict(frozen=True)

    request: SearchRequest = Field(..., description="Request the search ran with")
    directories: List[str] = Field(default_factory=list, description="Matched directory paths")
    files: List[str] = Field(default_factory=list, description="Matched file paths")
    stats: Dict[str, int] = Field(default_factory=dict, description="Traversal statistics")
    elapsed_seconds: float = Field(0.0, ge=0, description="Search wall time in seconds")

    @property
    def total_matches(self) -> int:
        return len(self.directories) + len(self.files)

    def has_matches(self) -> bool:
        """Check if anything at all was found."""
        return self.total_matches > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert the report to a dictionary representation."""
        data = self.model_dump()
        data['total_matches'] = self.total_matches
        return data
