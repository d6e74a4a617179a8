"""
Logging setup for the service.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger the first time it is called. Later calls are
no-ops, which keeps repeated ``create_app`` calls in tests from stacking
handlers.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """
    Configure the root logger once.

    :param level: Level name such as ``"DEBUG"`` or ``"info"``. Unknown
        names fall back to INFO.
    :param logfile: Optional path of a file to log to as well, resolved
        against the working directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if logfile:
        file_handler = logging.FileHandler(
            Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
