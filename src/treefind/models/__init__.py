"""
Data models for treefind.

This module contains the core data structures shared by the search workers.
"""

from .search_request import SearchRequest
from .search_results import EntryKind, EntryMatch, ResultStore, SearchReport
from .config import FinderSettings, SpinnerConfig

__all__ = [
    'SearchRequest',
    'EntryKind',
    'EntryMatch',
    'ResultStore',
    'SearchReport',
    'FinderSettings',
    'SpinnerConfig'
]
