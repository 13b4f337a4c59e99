"""
Logging setup shared by the entry points (gradio app, scripts).
"""
from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_HANDLER_NAME = "kbqa-stream"


def configure_logging(level: Optional[Union[int, str]] = None) -> logging.Logger:
    """
    Attach a single stream handler to the ``kbqa`` logger.

    Calling it again only updates the level.

    Args:
        level: Logging level name or number. None = settings.LOG_LEVEL.

    Returns:
        The ``kbqa`` package logger.
    """
    if level is None:
        from kbqa.utils.config import settings
        level = settings.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    logger = logging.getLogger("kbqa")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger
