"""
Logging configuration shared by the API and the uvicorn server.

``setup_logging`` installs one console handler (plus an optional file
handler) on the root logger and hands uvicorn's loggers over to it, so
request access lines, server lifecycle messages and application logs
all come out in the same format at the same level.  Handlers installed
here carry a marker attribute; calling ``setup_logging`` again while
they are attached does nothing, whatever other handlers (test capture,
embedding applications) sit on the root logger.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

HANDLER_MARKER = "_kasir_api_handler"

# Loggers uvicorn configures for itself unless told otherwise.
UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "uvicorn.asgi")


def resolve_level(level: str) -> int:
    """Map a level name to its number, falling back to ``INFO``."""
    numeric_level = logging.getLevelName(level.strip().upper())
    return numeric_level if isinstance(numeric_level, int) else logging.INFO


def installed_handlers(logger: Optional[logging.Logger] = None) -> List[logging.Handler]:
    """Return the handlers ``setup_logging`` attached to ``logger`` (root by default)."""
    logger = logger or logging.getLogger()
    return [h for h in logger.handlers if getattr(h, HANDLER_MARKER, False)]


def _mark(handler: logging.Handler, formatter: logging.Formatter) -> logging.Handler:
    handler.setFormatter(formatter)
    setattr(handler, HANDLER_MARKER, True)
    return handler


def route_uvicorn_logs(numeric_level: int) -> None:
    """Strip uvicorn's own handlers and let its records reach the root logger."""
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        for handler in list(uvicorn_logger.handlers):
            uvicorn_logger.removeHandler(handler)
        uvicorn_logger.propagate = True
        uvicorn_logger.setLevel(numeric_level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure root and uvicorn loggers.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to ``INFO``.
    logfile : Optional[str]
        Path to a file to log messages to.  If omitted, no file
        handler is added.
    """
    root = logging.getLogger()
    if installed_handlers(root):
        return

    numeric_level = resolve_level(level)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    root.addHandler(_mark(logging.StreamHandler(), formatter))
    if logfile:
        log_path = Path(logfile).resolve()
        root.addHandler(_mark(logging.FileHandler(log_path, encoding="utf-8"), formatter))

    route_uvicorn_logs(numeric_level)
