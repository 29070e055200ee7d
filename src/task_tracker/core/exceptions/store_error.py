from __future__ import annotations

from task_tracker.core.exceptions.task_tracker_error import TaskTrackerError


class StoreError(TaskTrackerError):
    """Raised when the underlying task store fails an operation."""


class StoreUnavailableError(StoreError):
    """Raised when the task store cannot be reached or opened."""
