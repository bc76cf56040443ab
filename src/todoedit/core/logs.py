"""Logging setup.

The terminal belongs to the TUI while it runs, so records go either to a
log file or to Textual's devtools console (``textual console``).
"""

import logging

from textual.logging import TextualHandler

from todoedit.models.config import TodoEditConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(config: TodoEditConfig) -> logging.Handler:
    """Attach a handler to the ``todoedit`` logger and return it"""
    if config.log_path is not None:
        handler: logging.Handler = logging.FileHandler(config.log_path)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    else:
        handler = TextualHandler()

    logger = logging.getLogger("todoedit")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)
    logger.setLevel(config.log_level)
    return handler
