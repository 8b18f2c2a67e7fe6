"""
loguru sinks for the reminder: console for interactive runs, and a rotating
file so lock cycles can be reconstructed after the fact.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

from loguru import logger as _logger

LOG_DIR_ENV = "LOCK_REMINDER_LOG_DIR"
LOG_LEVEL_ENV = "LOCK_REMINDER_LOG_LEVEL"
LOG_FILE_NAME = "reminder.log"
CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}"

_configured = False


def default_log_path() -> Path:
    """``$LOCK_REMINDER_LOG_DIR/reminder.log``, else under ``~/.local/state``."""
    base = os.environ.get(LOG_DIR_ENV)
    log_dir = Path(base) if base else Path.home() / ".local" / "state" / "lock-reminder"
    return log_dir / LOG_FILE_NAME


def configure(log_path: Optional[Path] = None) -> None:
    global _configured
    if _configured:
        return
    target = log_path or default_log_path()
    target.parent.mkdir(parents=True, exist_ok=True)

    _logger.remove()
    # pythonw / GUI launchers run without a stderr stream.
    if sys.stderr is not None:
        _logger.add(
            sys.stderr,
            level=os.environ.get(LOG_LEVEL_ENV, "INFO").upper(),
            format=CONSOLE_FORMAT,
            enqueue=True,
        )
    _logger.add(
        target,
        level="DEBUG",
        rotation="10 MB",
        retention=5,
        encoding="utf-8",
        enqueue=True,
        backtrace=True,
        diagnose=False,
    )
    _configured = True


def get_logger():
    configure()
    return _logger
