"""
Logging setup for the museum service.

Services log through ``logging.getLogger(__name__)``, so all of their
records end up under the ``museum_api`` logger.  ``setup_logging``
attaches the console handler (and the ``LOG_FILE`` handler when one
is configured) to that logger only, leaving the root logger to
uvicorn and test runners.
"""

import logging
from pathlib import Path
from typing import Optional

LOGGER_NAME = "museum_api"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers added here so repeated calls do not stack them.
_HANDLER_ATTR = "_museum_handler"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> logging.Logger:
    """Configure the ``museum_api`` logger and return it.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Value of ``LOG_FILE``.  The parent directory is created if it
        is missing.  Empty or ``None`` means console only.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(getattr(h, _HANDLER_ATTR, False) for h in logger.handlers):
        return logger

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).expanduser().resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_ATTR, True)
        logger.addHandler(handler)
    return logger
