"""
Logging setup for the Pitch Planner API.

Resources log every REST request at DEBUG and services log writes at
INFO, all under the ``pitch_planner_api`` logger hierarchy.
``setup_logging`` attaches a console handler (and a file handler when
``LOG_FILE`` is set) to the root logger, so uvicorn's own records share
the same format.  ``LOG_LEVEL`` applies to the application loggers;
third-party libraries stay at INFO unless the level is stricter.
"""

import logging
from pathlib import Path
from typing import Optional

APP_LOGGER = "pitch_planner_api"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure logging once per process.

    A second call (another ``create_app``, or a test runner that has
    already installed handlers) leaves the existing handlers alone and
    only adjusts the application logger level.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(APP_LOGGER).setLevel(numeric_level)

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(max(numeric_level, logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
