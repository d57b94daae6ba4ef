"""Logging setup for the command line entry point."""

import logging

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Attach a stream handler to the package logger.

    Library code only creates module loggers; handlers are left to the host
    runtime. The CLI calls this so its output is visible.
    """
    package_logger = logging.getLogger("twitter_sessions")
    package_logger.setLevel(level.upper())
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
