"""
Commands module for the sonarrctl CLI
"""

from .edit_command import delete_file_command, delete_series_command, monitor_command
from .list_command import (
    calendar_command,
    diskspace_command,
    episodes_command,
    files_command,
    series_command,
    tags_command,
)
from .queue_command import queue_command, watch_command
from .test_command import status_command, test_command

__all__ = [
    "calendar_command",
    "delete_file_command",
    "delete_series_command",
    "diskspace_command",
    "episodes_command",
    "files_command",
    "monitor_command",
    "queue_command",
    "series_command",
    "status_command",
    "tags_command",
    "test_command",
    "watch_command",
]
