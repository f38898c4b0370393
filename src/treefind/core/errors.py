from typing import Optional


class TreefindError(Exception):
    """Base application exception."""
    pass


class ConfigurationError(TreefindError):
    """Raised when settings parsing or validation fails."""
    pass


class WorkerFailedError(TreefindError):
    """
    Raised when a background worker thread terminated with an exception.

    The search report can only be trusted when both workers ran to completion,
    so the coordinator raises this instead of rendering partial results.
    """

    def __init__(self, worker_name: str, cause: Optional[BaseException] = None):
        self.worker_name = worker_name
        self.cause = cause
        message = f"Worker '{worker_name}' terminated abnormally"
        if cause is not None:
            message += f": {cause!r}"
        super().__init__(message)
