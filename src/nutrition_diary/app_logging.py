"""Logging configuration helpers."""

import logging


def configure_logging(level: int | str = logging.INFO) -> None:
    """Set the diary log level and attach one stream handler.

    The level accepts a number or a name such as ``"DEBUG"``. Calling this
    again only updates the level.
    """
    logger = logging.getLogger("nutrition_diary")
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
