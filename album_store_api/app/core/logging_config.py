"""
Basic logging configuration for the application.

The ``setup_logging`` function attaches a console handler, and a file
handler when ``LOG_FILE`` is set, to the root logger.  Records are
formatted as ``timestamp [LEVEL] logger: message``.  Handlers are
installed at most once per logger.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    logger: Optional[logging.Logger] = None,
) -> logging.Logger:
    """Configure ``logger`` (the root logger by default) and return it.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to append records to, resolved against the
        current working directory.  If omitted only the console
        handler is added.
    logger : Optional[logging.Logger]
        Logger to configure.  A logger that already has handlers is
        returned untouched, so repeated ``create_app`` calls do not
        duplicate output.
    """
    if logger is None:
        logger = logging.getLogger()
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
