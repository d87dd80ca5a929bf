"""
Process-wide logging for the User Directory API.

Every module logs through ``logging.getLogger(__name__)``; this module
only decides where those records go.  ``setup_logging`` is called by
``create_app`` with ``LOG_LEVEL`` and ``LOG_FILE`` from the settings.
When the root logger already has handlers (uvicorn with a log config,
pytest's capture, a second ``create_app``) it is left untouched.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Third-party loggers that report every upstream request at INFO.
NOISY_LOGGERS = ("httpx", "httpcore")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach console (and optional file) handlers to the root logger.

    Unknown level names fall back to ``INFO``.  Below ``DEBUG`` the
    upstream HTTP libraries are limited to warnings so that each proxied
    request does not produce two extra lines.

    Returns ``True`` when handlers were installed, ``False`` when the
    root logger was already configured.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)
    for handler in _build_handlers(logfile):
        root.addHandler(handler)

    if numeric_level > logging.DEBUG:
        for name in NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)
    return True
