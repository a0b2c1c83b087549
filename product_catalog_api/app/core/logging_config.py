"""
Logging setup for the catalog service.

Both ``create_app`` and ``server.main`` call ``setup_logging``; only the
first call configures anything.  Records from the service layer (one
line per created, updated or deleted product) and from uvicorn share
the same root handlers, so ``LOG_FILE`` captures both.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach console (and optional file) handlers to the root logger.

    Parameters
    ----------
    level : str
        ``LOG_LEVEL`` value, case insensitive.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        ``LOG_FILE`` value.  Missing parent directories are created.
    """
    root = logging.getLogger()
    if root.handlers:
        # pytest's capture handlers count as configuration too.
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
