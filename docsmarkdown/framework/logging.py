"""Logging for Docs Markdown.

``setup_logging()`` configures the ``docsmarkdown`` logger hierarchy with a
FileHandler to ~/docsmarkdown.log. All modules that call
``logging.getLogger("docsmarkdown.xxx")`` inherit this handler automatically.
"""

import logging
import os

LOG_PATH = os.path.join(os.path.expanduser("~"), "docsmarkdown.log")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"

_LEVEL_ALIASES = {"WARN": "WARNING"}

_setup_done = False


def _numeric_level(level):
    name = str(level or "").upper()
    name = _LEVEL_ALIASES.get(name, name)
    return getattr(logging, name, logging.DEBUG)


def setup_logging(level="DEBUG", path=None):
    """Configure the ``docsmarkdown`` logger hierarchy.

    Attaches a FileHandler to the ``docsmarkdown`` logger (not root), so
    the host's own logging configuration is left alone. Truncates the log
    file on startup (mode ``"w"``) for clean sessions.

    No-op after the first call, or if the logger already has handlers.
    """
    global _setup_done
    if _setup_done:
        return
    _setup_done = True

    logger = logging.getLogger("docsmarkdown")
    if logger.handlers:
        return

    logger.propagate = False

    handler = logging.FileHandler(path or LOG_PATH, mode="w", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(_numeric_level(level))


def set_log_level(level):
    """Change the ``docsmarkdown`` logger level at runtime."""
    logging.getLogger("docsmarkdown").setLevel(_numeric_level(level))
