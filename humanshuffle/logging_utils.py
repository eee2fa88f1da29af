"""Logging setup for the humanshuffle command line."""

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def setup_logging(level: str = "WARNING", fmt: str = LOG_FORMAT) -> None:
    """
    Configure the root logger; call once at program start.

    Raises:
        ValueError: If level is not a known logging level name
    """
    logging.basicConfig(level=level.upper(), format=fmt)
