"""
Logging configuration for the API process.

``setup_logging`` installs one console handler (and optionally a file
handler) on the root logger and hands the uvicorn loggers over to
it, so application, server and access log lines share one format.
Handlers are identified by name: calling the function again only
updates the level and adds a file handler if one was not attached
yet.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

CONSOLE_HANDLER_NAME = "investor_shield.console"
FILE_HANDLER_NAME = "investor_shield.file"

# Loggers created by uvicorn; they log through the root handlers.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _has_handler(logger: logging.Logger, name: str) -> bool:
    return any(h.get_name() == name for h in logger.handlers)


def _add_handler(logger: logging.Logger, handler: logging.Handler, name: str) -> None:
    handler.set_name(name)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root and uvicorn loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.  Applied on
        every call.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric_level)

    if not _has_handler(root, CONSOLE_HANDLER_NAME):
        _add_handler(root, logging.StreamHandler(), CONSOLE_HANDLER_NAME)

    if logfile and not _has_handler(root, FILE_HANDLER_NAME):
        log_path = Path(logfile).resolve()
        _add_handler(root, logging.FileHandler(log_path, encoding="utf-8"), FILE_HANDLER_NAME)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.setLevel(numeric_level)
        server_logger.propagate = True
