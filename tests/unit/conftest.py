import io

import pytest
from rich.console import Console

from treefind.console import ConsoleReporter


def _make_reporter(terminal=False):
    output = io.StringIO()
    console = Console(file=output, force_terminal=terminal, color_system=None,
                      highlight=False, soft_wrap=True)
    return ConsoleReporter(console), output


@pytest.fixture
def make_reporter():
    """Factory for a reporter writing to an in-memory buffer; returns (reporter, buffer)."""
    return _make_reporter
