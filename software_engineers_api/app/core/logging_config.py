"""
Logging setup for the application.

``setup_logging`` may be called many times (every ``create_app`` call
does so, and the test suite builds an app per test).  Each call applies
the requested level to the root logger; handlers are only ever added
once.  The console handler is skipped when something else (uvicorn,
pytest) has already attached handlers to the root logger, and a file
handler is attached at most once per path.

Every other module simply calls ``logging.getLogger(__name__)``.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

HANDLER_PREFIX = "software_engineers_api"
CONSOLE_HANDLER_NAME = f"{HANDLER_PREFIX}.console"


def resolve_level(level: str) -> int:
    """Map a level name such as ``"debug"`` to its number, defaulting to INFO."""
    numeric_level = logging.getLevelName(level.strip().upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def _file_handler_name(log_path: Path) -> str:
    return f"{HANDLER_PREFIX}.file:{log_path}"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.  Applied on
        every call.
    logfile : Optional[str]
        Path to a file to log messages to.  Paths are resolved relative
        to the current working directory.
    """
    logger = logging.getLogger()
    logger.setLevel(resolve_level(level))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    installed = {handler.get_name() for handler in logger.handlers}

    if not logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.set_name(CONSOLE_HANDLER_NAME)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        name = _file_handler_name(log_path)
        if name not in installed:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.set_name(name)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
