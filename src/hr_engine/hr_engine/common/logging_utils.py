from __future__ import annotations

import logging
from typing import Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
# Package root, whichever path the package was imported under.
PACKAGE_LOGGER = __name__.rsplit(".common", 1)[0]


def configure_logging(level: Union[int, str] = logging.INFO) -> logging.Logger:
    """Install one stream handler on the package logger.

    Library modules only create loggers; the host application (or the
    container) calls this once.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    root.setLevel(level)
    if not any(getattr(h, "_hr_engine", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._hr_engine = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    return root
