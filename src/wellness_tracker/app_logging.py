"""Logging configuration helpers."""

import logging

_APP_LOGGER = "wellness_tracker"
_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Attach one stream handler to the app logger and set its level.

    Calling it again only updates the level. Unknown level names fall back to
    INFO.
    """
    logger = logging.getLogger(_APP_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.strip().upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
