"""
Screen locking through the first available external lock command.
"""

from __future__ import annotations

import subprocess
import sys
from typing import Callable, Optional, Sequence, Tuple

from lock_reminder import logger as app_logger

Command = Tuple[str, ...]

LINUX_LOCK_COMMANDS: Tuple[Command, ...] = (
    ("gnome-screensaver-command", "--lock"),
    ("xscreensaver-command", "--lock"),
    ("qdbus", "org.freedesktop.ScreenSaver", "/ScreenSaver", "Lock"),
    ("qdbus", "org.gnome.ScreenSaver", "/ScreenSaver", "Lock"),
    ("xdg-screensaver", "lock"),
    # Generic X11 fallback; blocks until the user unlocks.
    ("xlock",),
    # Exits 0 whenever a logind session exists, even with no locker agent.
    ("loginctl", "lock-session"),
)
WINDOWS_LOCK_COMMANDS: Tuple[Command, ...] = (("rundll32.exe", "user32.dll,LockWorkStation"),)
MACOS_LOCK_COMMANDS: Tuple[Command, ...] = (("pmset", "displaysleepnow"),)


def default_lock_commands(platform: str = sys.platform) -> Tuple[Command, ...]:
    """Return the ordered lock command candidates for ``platform``."""
    if platform == "win32":
        return WINDOWS_LOCK_COMMANDS
    if platform == "darwin":
        return MACOS_LOCK_COMMANDS
    return LINUX_LOCK_COMMANDS


class ScreenLocker:
    """
    Tries each command in order and stops at the first one that exits with
    status 0. Commands run synchronously on the calling thread.
    """

    def __init__(
        self,
        commands: Optional[Sequence[Command]] = None,
        *,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ) -> None:
        self.commands: Tuple[Command, ...] = tuple(commands) if commands is not None else default_lock_commands()
        self._runner = runner
        self._logger = app_logger.get_logger()

    def lock(self) -> bool:
        for command in self.commands:
            if self._run(command) == 0:
                self._logger.info("Screen locked with '{}'.", " ".join(command))
                return True
        self._logger.error("No lock command succeeded out of {} candidates.", len(self.commands))
        return False

    def _run(self, command: Command) -> Optional[int]:
        try:
            completed = self._runner(
                list(command),
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except (OSError, subprocess.SubprocessError) as exc:
            self._logger.debug("Lock command '{}' could not be started: {}", " ".join(command), exc)
            return None
        self._logger.debug("Lock command '{}' exited with {}", " ".join(command), completed.returncode)
        return completed.returncode
