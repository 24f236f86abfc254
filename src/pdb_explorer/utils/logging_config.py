"""Logging configuration for the command line and server entry points."""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%H:%M:%S"


def configure_logging(level: str | int = "WARNING", verbose: bool = False) -> None:
    """Configure root logging once for an entry point.

    Args:
        level: Log level name or number, used unless ``verbose`` is set
        verbose: Force DEBUG output
    """
    if verbose:
        level = logging.DEBUG
    elif isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=DATE_FORMAT, force=True)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
