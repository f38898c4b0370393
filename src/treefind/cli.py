"""
Command line entry point for treefind.

    treefind <source_directory> <target_substring> [extension]

Missing positional arguments print the usage line and exit with status 1
before any traversal starts. Arguments after the extension are ignored.
"""

import logging
from typing import Optional

import typer
from pydantic import ValidationError

from .console import ConsoleReporter
from .coordinator import SearchCoordinator
from .core.logging import configure_logging
from .models.config import FinderSettings
from .models.search_request import SearchRequest, WILDCARD_EXTENSION


logger = logging.getLogger(__name__)

USAGE = "Usage: treefind source_directory target_substring [extension]"

app = typer.Typer(help="Find files and directories whose path contains a substring.",
                  add_completion=False)


@app.command(context_settings={"allow_extra_args": True})
def search(
    ctx: typer.Context,
    source: Optional[str] = typer.Argument(None, help="Directory to search from", show_default=False),
    target: Optional[str] = typer.Argument(None, help="Substring to look for", show_default=False),
    extension: str = typer.Argument(WILDCARD_EXTENSION, help="Only report files with this extension"),
) -> None:
    """Search SOURCE recursively for entries whose path contains TARGET."""
    reporter = ConsoleReporter()
    if source is None or target is None:
        reporter.info(USAGE)
        raise typer.Exit(code=1)

    settings = FinderSettings()
    configure_logging(settings.log_level)
    if ctx.args:
        logger.debug(f"Ignoring extra arguments: {ctx.args}")

    try:
        request = SearchRequest(source=source, target=target, extension=extension)
    except ValidationError as e:
        for error in e.errors():
            reporter.missing(f"Invalid {error['loc'][0]}: {error['msg']}")
        reporter.info(USAGE)
        raise typer.Exit(code=1)

    SearchCoordinator(request, settings=settings, reporter=reporter).run()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
