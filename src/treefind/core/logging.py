import logging
import sys
from typing import Union


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def configure_logging(level: Union[int, str] = logging.WARNING) -> None:
    """
    Configure the root logger.

    Log records go to stderr; stdout is reserved for the spinner and the report.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())

    logging.basicConfig(level=level, handlers=[logging.StreamHandler(sys.stderr)], format=LOG_FORMAT)
