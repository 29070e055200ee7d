from __future__ import annotations

from task_tracker.core.exceptions.task_tracker_error import TaskTrackerError


class TaskApiConnectionError(TaskTrackerError):
    """Raised by the client when the task service cannot be reached at all."""
