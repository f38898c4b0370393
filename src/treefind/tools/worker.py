"""
Background thread base for the search workers.

An exception escaping a plain thread is printed and then lost, and a join on
that thread still returns normally. Workers built on this class keep the
exception so whoever joins them can tell a finished worker from a dead one.
"""

import logging
import threading
from typing import Optional

from ..core.errors import WorkerFailedError


logger = logging.getLogger(__name__)


class BackgroundWorker(threading.Thread):
    """Thread that records the exception that terminated it, if any."""

    def __init__(self, name: str):
        super().__init__(name=name, daemon=True)
        self.error: Optional[BaseException] = None

    def run(self) -> None:
        try:
            self.work()
        except BaseException as e:
            logger.exception(f"Worker {self.name} failed")
            self.error = e

    def work(self) -> None:
        """Body of the thread; subclasses must override this."""
        raise NotImplementedError

    def join_checked(self, timeout: Optional[float] = None) -> None:
        """
        Join the thread and re-raise its failure.

        Raises:
            WorkerFailedError: If the worker died with an exception, or is still
                alive after `timeout` seconds
        """
        self.join(timeout)
        if self.is_alive():
            raise WorkerFailedError(self.name, TimeoutError(f"still running after {timeout}s"))
        if self.error is not None:
            raise WorkerFailedError(self.name, self.error) from self.error
