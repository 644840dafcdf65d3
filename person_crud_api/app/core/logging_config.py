"""
Logging setup for the Person CRUD API.

``setup_logging`` installs one console handler (and optionally a file
handler) on the root logger, so application modules only need
``logging.getLogger(__name__)``.  Uvicorn's per-request access log is
kept at its own, quieter level: mutations are already logged by the
service layer, and one line per GET drowns them out.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
ACCESS_LOGGER = "uvicorn.access"


def _level(name: str, default: int) -> int:
    return getattr(logging, name.upper(), default)


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    access_level: str = "WARNING",
) -> None:
    """Configure the root logger and the uvicorn access logger.

    The access logger level is always applied.  Handlers are only
    attached when the root logger has none yet, so repeated calls
    (a second ``create_app``, or a test runner that already installed
    its own handlers) leave existing output alone.

    Parameters
    ----------
    level : str
        Root level name, e.g. ``"DEBUG"``.  Unknown names fall back
        to ``INFO``.
    logfile : Optional[str]
        File to append log records to, in addition to the console.
    access_level : str
        Level for ``uvicorn.access``.  Unknown names fall back to
        ``WARNING``.
    """
    logging.getLogger(ACCESS_LOGGER).setLevel(_level(access_level, logging.WARNING))

    root = logging.getLogger()
    if root.handlers:
        return
    root.setLevel(_level(level, logging.INFO))

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    handlers = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
