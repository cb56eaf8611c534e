"""
Environment settings.

READY_SET_LOG        Path of a log file. Unset means no logging output
                     (Textual owns the terminal, so we never log to it).
READY_SET_LOG_LEVEL  DEBUG, INFO, WARNING... (default INFO)
READY_SET_THEME      "dark" or "light" (default dark)
"""

import logging
import os

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_theme() -> str:
    theme = os.environ.get("READY_SET_THEME", "dark").strip().lower()
    return "light" if theme == "light" else "dark"


def get_log_level() -> int:
    name = os.environ.get("READY_SET_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Send ready_set log records to READY_SET_LOG, if set.

    Safe to call more than once: only the first call adds a handler.
    """
    path = os.environ.get("READY_SET_LOG")
    root = logging.getLogger("ready_set")
    if root.handlers:
        return
    if not path:
        root.addHandler(logging.NullHandler())
        return

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(get_log_level())
