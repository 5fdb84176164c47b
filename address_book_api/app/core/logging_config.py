"""
Logging setup for the Address Book API.

``setup_logging`` installs one formatter on the root logger, writing to
the console and, if ``LOG_FILE`` is set, to a file as well.  Uvicorn's
own loggers are stripped of their handlers and made to propagate, so
server start‑up, errors and access lines end up in the same place and
format as application messages.  ``run.py`` starts uvicorn with
``log_config=None`` so uvicorn leaves this configuration alone.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

# Handlers added by the last call, removed again on ``force``.
_installed: List[logging.Handler] = []


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, ``INFO`` if unknown."""
    numeric = logging.getLevelName(level.upper())
    return numeric if isinstance(numeric, int) else logging.INFO


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None, force: bool = False) -> None:
    """Configure the root logger and route uvicorn's loggers through it.

    Parameters
    ----------
    level : str
        Level name, case insensitive.  Applies to the root logger and
        uvicorn's loggers.
    logfile : Optional[str]
        Extra file to log to.  Empty or ``None`` logs to the console only.
    force : bool
        Replace a previous configuration instead of keeping it.
    """
    root = logging.getLogger()
    if _installed and not force:
        return
    for handler in _installed:
        root.removeHandler(handler)
        handler.close()
    _installed.clear()

    numeric_level = resolve_level(level)
    root.setLevel(numeric_level)
    for handler in _build_handlers(logfile):
        root.addHandler(handler)
        _installed.append(handler)

    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers.clear()
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(numeric_level)
