from task_viewer.models.task import (
    NO_STATUS,
    UNTITLED,
    TaskCollection,
    display_status,
    display_title,
    task_status,
    task_title,
)
from task_viewer.models.theme import ThemePreference

__all__ = [
    "NO_STATUS",
    "UNTITLED",
    "TaskCollection",
    "ThemePreference",
    "display_status",
    "display_title",
    "task_status",
    "task_title",
]
