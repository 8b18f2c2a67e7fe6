"""
lock_reminder package.

Entry point and process-wide logging for the Lock Reminder tray utility.
"""

__all__ = [
    "main",
    "logger",
]
