"""Logging configuration for the bridge process.

The calling tool does not show the bridge's output, and some of its actions
invoke the bridge with junk arguments, so nothing is written to the console
unless --verbose is given. A log file can be configured for diagnostics.
"""

import logging
import sys
from pathlib import Path

from vsbridge.domain.config import LoggingSettings

LOGGER_NAME = "vsbridge"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: LoggingSettings, verbose: bool = False) -> logging.Logger:
    """Attach handlers to the package logger.

    Args:
        settings: Logging section of the config.
        verbose: Also log everything to stderr.

    Returns:
        The configured "vsbridge" logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    logger.addHandler(logging.NullHandler())
    levels = []

    if verbose:
        stream = logging.StreamHandler(sys.stderr)
        stream.setLevel(logging.DEBUG)
        stream.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(stream)
        levels.append(logging.DEBUG)

    if settings.file:
        log_path = Path(settings.file).expanduser()
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
        except OSError as e:
            logger.warning("Cannot open log file %s: %s", log_path, e)
        else:
            file_handler.setLevel(settings.level_number)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
            logger.addHandler(file_handler)
            levels.append(settings.level_number)

    logger.setLevel(min(levels) if levels else logging.WARNING)
    return logger
