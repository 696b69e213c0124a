"""Logging for hosts embedding conversation-display.

Everything this package logs goes through the ``conversation_display``
logger: lookup traces at DEBUG, formatting fallbacks and ignored
environment values at WARNING. ``configure_logging`` hangs two handlers off
that logger, leaving the host's root logger alone:

- stderr, at ``DisplaySettings.log_level``
- a rotating DEBUG file under $XDG_STATE_HOME/conversation-display/
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import VALID_LEVELS
from .settings import DisplaySettings

APP_NAME = "conversation-display"
PACKAGE_LOGGER = "conversation_display"
STDERR_FORMAT = "%(levelname)s [%(name)s] %(message)s"
FILE_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
MAX_BYTES = 512_000
BACKUP_COUNT = 2

_stderr_handler: logging.StreamHandler | None = None
_file_handler: RotatingFileHandler | None = None


def log_path() -> Path:
    """Return $XDG_STATE_HOME/conversation-display/display.log (default ~/.local/state)."""
    state_home = os.environ.get("XDG_STATE_HOME") or Path.home() / ".local" / "state"
    return Path(state_home) / APP_NAME / "display.log"


def configure_logging(
    settings: DisplaySettings | None = None,
    *,
    log_file: Path | None = None,
    log_to_file: bool = True,
) -> logging.Logger:
    """Attach stderr and file handlers to the package logger.

    The stderr level comes from ``settings.log_level`` (see
    ``load_settings_from_env`` for the ``LOG_LEVEL`` override). A second call
    only moves the stderr level; handlers are attached once.
    """
    global _stderr_handler, _file_handler  # noqa: PLW0603

    settings = settings or DisplaySettings()
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    if _stderr_handler is None:
        package_logger.setLevel(logging.DEBUG)
        _stderr_handler = logging.StreamHandler(sys.stderr)
        _stderr_handler.setFormatter(logging.Formatter(STDERR_FORMAT))
        package_logger.addHandler(_stderr_handler)
    set_stderr_level(settings.log_level)

    if log_to_file and _file_handler is None:
        target = log_file or log_path()
        target.parent.mkdir(parents=True, exist_ok=True)
        _file_handler = RotatingFileHandler(target, maxBytes=MAX_BYTES, backupCount=BACKUP_COUNT)
        _file_handler.setLevel(logging.DEBUG)
        _file_handler.setFormatter(logging.Formatter(FILE_FORMAT))
        package_logger.addHandler(_file_handler)

    return package_logger


def set_stderr_level(level_name: str) -> None:
    """Change the stderr handler level; unknown names are ignored."""
    if _stderr_handler is None:
        return
    upper = level_name.strip().upper()
    if upper in VALID_LEVELS:
        _stderr_handler.setLevel(upper)


def reset_logging() -> None:
    """Detach and close the handlers added by ``configure_logging``."""
    global _stderr_handler, _file_handler  # noqa: PLW0603

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in (_stderr_handler, _file_handler):
        if handler is not None:
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)
    _stderr_handler = None
    _file_handler = None
