"""Permission action enum for handling unreadable entries during directory traversal."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be listed during traversal.

    Values:
        IGNORE: Skip the directory's contents silently
        WARN: Skip the directory's contents and log a warning (default at the CLI)
        RAISE: Raise the error immediately, aborting the walk
    """

    IGNORE = "ignore"
    WARN = "warn"
    RAISE = "raise"
