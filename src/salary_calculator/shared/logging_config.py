"""Loguru configuration for command-line use."""

import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(verbose: bool = False) -> None:
    """Send package logs to stderr.

    Replaces any existing sinks. DEBUG level with verbose, WARNING otherwise.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format=LOG_FORMAT,
    )
    logger.enable("salary_calculator")
