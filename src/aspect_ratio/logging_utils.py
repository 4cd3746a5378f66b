"""Logging helpers for aspect_ratio."""

from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Callable

from aspect_ratio import constants

_LOGGER_NAME = "aspect_ratio"
_HANDLER_ATTR = "aspect_ratio_handler"


class CallbackHandler(logging.Handler):
    """Forward log messages to a callable sink."""

    def __init__(self, callback: Callable[[str], None]) -> None:
        super().__init__()
        self._callback = callback

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self._callback(self.format(record))
        except Exception:
            self.handleError(record)


def _tagged(logger: logging.Logger, key: str) -> list[logging.Handler]:
    return [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, None) == key]


def _remove_tagged(logger: logging.Logger, key: str) -> None:
    for handler in _tagged(logger, key):
        logger.removeHandler(handler)
        handler.close()


def _log_level() -> int:
    level_name = os.environ.get(constants.ENV_LOG_LEVEL, "WARNING").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.WARNING


def _log_path() -> Path | None:
    configured = os.environ.get(constants.ENV_LOG_PATH, "").strip()
    if configured:
        return Path(configured).expanduser()
    return None


def setup_logging(
    sink: Callable[[str], None] | None = None,
    enable_console: bool | None = None,
    level: int | None = None,
) -> Path | None:
    """Configure aspect_ratio logging.

    Calling this again replaces the sink and console handlers instead of
    stacking new ones.

    Args:
        sink: Optional callback receiving formatted log lines.
        enable_console: Whether to log to stderr (defaults to True when no sink is given).
        level: Logging level (defaults to ASPECT_RATIO_LOG_LEVEL env var or WARNING).

    Returns:
        Path to the log file, or None when ASPECT_RATIO_LOG_PATH is unset.
    """
    log_level = level if level is not None else _log_level()

    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(log_level)

    file_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s")
    console_formatter = logging.Formatter("%(levelname)s: %(message)s")
    sink_formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")

    # File handler is only added once
    log_path = _log_path()
    if log_path is not None and not _tagged(logger, "file"):
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=5 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        setattr(file_handler, _HANDLER_ATTR, "file")
        file_handler.setFormatter(file_formatter)
        logger.addHandler(file_handler)
        logger.info("Logging to %s", log_path)

    if enable_console is None:
        enable_console = sink is None

    if enable_console:
        if not _tagged(logger, "console"):
            console_handler = logging.StreamHandler()
            setattr(console_handler, _HANDLER_ATTR, "console")
            console_handler.setFormatter(console_formatter)
            logger.addHandler(console_handler)
        for handler in _tagged(logger, "console"):
            handler.setLevel(log_level)
    else:
        _remove_tagged(logger, "console")

    _remove_tagged(logger, "sink")
    if sink is not None:
        sink_handler = CallbackHandler(sink)
        setattr(sink_handler, _HANDLER_ATTR, "sink")
        sink_handler.setLevel(log_level)
        sink_handler.setFormatter(sink_formatter)
        logger.addHandler(sink_handler)

    return log_path
