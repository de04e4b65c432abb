from typing import Optional


class TaskViewerError(Exception):
    """Base error for the task viewer."""


class TaskFetchError(TaskViewerError):
    """Loading tasks from the relay failed; the message is shown to the user."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status
