"""Logging configuration for the catalog service.

``setup_logging`` wires the root logger from ``Settings``: a console
handler always, a file handler when ``log_file`` is set. Repeated
calls, as happen when several apps are built in one process, only
adjust the level.
"""

from __future__ import annotations

import logging
from pathlib import Path

from catalog.infrastructure.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed here so they are never added twice.
_HANDLER_ATTR = "_catalog_handler"


def setup_logging(settings: Settings) -> logging.Logger:
    """Configure and return the root logger for ``settings``.

    Unknown level names fall back to INFO. Handlers attached by other
    code (pytest, uvicorn) are left alone.
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    if any(getattr(h, _HANDLER_ATTR, False) for h in root.handlers):
        return root

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if settings.log_file:
        handlers.append(
            logging.FileHandler(Path(settings.log_file).resolve(), encoding="utf-8")
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_ATTR, True)
        root.addHandler(handler)
    return root
