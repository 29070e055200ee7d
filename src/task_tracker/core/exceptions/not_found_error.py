from __future__ import annotations

from task_tracker.core.exceptions.task_tracker_error import TaskTrackerError


class TaskNotFoundError(TaskTrackerError):
    """Raised when no task matches the requested id."""

    def __init__(self, task_id: str) -> None:
        super().__init__("Task not found", context={"task_id": task_id})
        self.task_id = task_id
