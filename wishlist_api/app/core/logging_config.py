"""
Root logger setup for the Wishlist API.

``create_app`` calls ``setup_logging`` with the level and optional log
file from ``Settings``.  The test suite builds a fresh application per
test, so the setup only runs once per process: later calls find the
root logger already configured and leave it alone.  Modules log through
``logging.getLogger(__name__)``; the error boundary in ``main`` logs
unhandled request failures with their traceback.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach a console handler, and a file handler when ``logfile`` is set.

    ``level`` is a logging level name such as ``"DEBUG"`` (case
    insensitive); unknown names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
