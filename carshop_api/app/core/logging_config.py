"""
Logging configuration for the mock API.

``setup_logging`` is called by every ``create_app``.  The first call
attaches the console handler (unless something else, such as pytest
or uvicorn, already configured the root logger); later calls only
adjust the level and add a file handler for a log file not yet in
use.  An application built with ``Settings(log_level="DEBUG")``
therefore gets debug output even when another app was built first.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _file_handler_for(logger: logging.Logger, path: Path) -> Optional[logging.FileHandler]:
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path:
            return handler
    return None


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> int:
    """Configure the root logger and return the level applied.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        Optional file to log to in addition to the console.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    if not root.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        if _file_handler_for(root, log_path) is None:
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    return numeric_level
