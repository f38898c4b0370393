"""
Search workers for treefind.

This package contains the background threads a search runs on: the
filesystem traversal and the progress spinner.
"""

from .fs_walker import FSWalker, TraversalWorker
from .spinner import SpinnerWorker
from .worker import BackgroundWorker

__all__ = ['FSWalker', 'TraversalWorker', 'SpinnerWorker', 'BackgroundWorker']
